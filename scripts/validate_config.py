#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from provider_console.config.loader import ConfigLoader
from provider_console.config.validation import ConfigValidator, ValidationError
from provider_console.errors import ConfigurationError


def validate_console_config(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged console configuration."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating provider console configuration in {loader.config_dir}...")
    if not loader.config_file.exists():
        print(f"ℹ️  {loader.config_file.name} not found, validating defaults only")

    try:
        errors = validate_console_config(config_dir)
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    config = loader.load()
    print(f"✅ API: {config.api.base_url} (timeout {config.api.timeout_seconds}s)")
    print(f"✅ Instrument page size: {config.instruments.page_size}")
    print(f"✅ Notices dismiss after {config.notices.dismiss_after_seconds}s")
    print(f"\n🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
