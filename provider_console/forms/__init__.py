"""
Schema-driven adapter configuration forms.

Adapter settings arrive as a runtime schema of named, typed fields. This
package turns that schema into an editable string map and interprets the
edited values back into a typed configuration payload.
"""
