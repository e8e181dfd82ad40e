#!/usr/bin/env python3
"""Print the effective quote configuration, with the carrier password masked."""

import sys
from pathlib import Path


def _mask(secret: str) -> str:
    if not secret:
        return "(not set)"
    if len(secret) <= 4:
        return "*" * len(secret)
    return secret[:2] + "*" * (len(secret) - 4) + secret[-2:]


def main() -> int:
    project_root = Path(__file__).parent
    sys.path.insert(0, str(project_root / "src"))

    print("=" * 60)
    print("Freight Quote configuration")
    print("=" * 60)

    env_file = project_root / ".env"
    if env_file.exists():
        print(f"Found .env file at: {env_file}")
    else:
        print(f".env file not found at {env_file}; using environment and defaults")
    print()

    try:
        from freight.config import settings
        from freight.data.warehouse_repository import get_warehouses

        warehouses = get_warehouses(settings)
    except Exception as e:
        print(f"Error loading config: {e}")
        print("Make sure you're running this from the project root directory")
        return 1

    print(f"Correios company code: {settings.correios_company_code or '(not set)'}")
    print(f"Correios password:     {_mask(settings.correios_password)}")
    print(f"Enabled services:      {', '.join(settings.correios_services) or '(none)'}")
    print(f"Express service:       {settings.correios_express_service}")
    print()
    print(f"Warehouses ({len(warehouses)}):")
    for warehouse in warehouses:
        print(f"  - {warehouse.name}: {warehouse.postal_code}")
    print()

    if not warehouses:
        print("ERROR: no warehouse configured (FREIGHT_WAREHOUSES or FREIGHT_WAREHOUSES_FILE)")
        return 1
    if not settings.correios_services:
        print("ERROR: no carrier service enabled (FREIGHT_CORREIOS_SERVICES)")
        return 1
    print("Configuration looks complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
