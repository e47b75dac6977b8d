"""Example: using the service layer without Flask."""

import importlib

from config import get_settings_module

from src.attendance_ledger.attendance_ledger.container import build_container
from src.attendance_ledger.attendance_ledger.core.exceptions import DuplicateEntryError


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    service = container.ledger_service

    try:
        service.record_attendance("S1", "present")
    except DuplicateEntryError as e:
        print(e)

    print(service.get_summary().as_dict())
    print("valid:", service.is_valid())


if __name__ == "__main__":
    main()
