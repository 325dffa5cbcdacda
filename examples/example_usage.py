"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the payroll logic lives in the services.
"""

import importlib
import sys

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container


def main(year: int, month: int):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, calculator=settings.PAYROLL_CALCULATOR)

    for slip in container.payroll_service.generate_slips(year=year, month=month):
        print(f"{slip.staff_name:<25} paid={slip.present_days + slip.paid_leave_days:>2}d net={slip.net_pay:>12,.2f}")


if __name__ == "__main__":
    main(int(sys.argv[1]), int(sys.argv[2]))
