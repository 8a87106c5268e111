"""Interactive text console for the ledger."""

import logging
from typing import Callable

from ledger.app_context import get_app_context
from ledger.config.logging_config import setup_logging
from ledger.core.exceptions import ErrorKind, ValidationError
from ledger.core.money import to_money
from ledger.domain.capabilities import supports_interest
from ledger.services import BankingService

logger = logging.getLogger(__name__)

MENU = (
    "\nChoose operation: \n"
    "D - Deposit\n"
    "W - Withdraw\n"
    "S - Show Account\n"
    "H - Show Transaction History\n"
    "I - Apply Interest\n"
    "E - Exit\n"
    "Choice: "
)

# Short refusal messages shown for withdrawal failures
WITHDRAWAL_ERRORS = {
    ErrorKind.INSUFFICIENT_FUNDS: "Insufficient funds",
    ErrorKind.OVERDRAFT_EXCEEDED: "Overdraft limit exceeded",
}


def _read_amount(read: Callable[[str], str], prompt: str):
    try:
        return to_money(read(prompt))
    except ValidationError:
        return None


def _run_round(
    service: BankingService,
    read: Callable[[str], str],
    write: Callable[[str], None],
) -> bool:
    """Handle one name prompt and one operation. Returns False to quit."""
    name = read("\nEnter account owner name (or 'exit' to quit): ").strip()
    if name == "exit":
        return False

    account = service.find_account(name)
    if account is None:
        write("Account not found.")
        return True

    choice = read(MENU).strip().upper()

    if choice == "D":
        amount = _read_amount(read, "Enter deposit amount: ")
        if amount is None:
            write("Invalid amount.")
            return True
        service.deposit(name, amount)
        write("Deposit successful.")
    elif choice == "W":
        amount = _read_amount(read, "Enter withdrawal amount: ")
        if amount is None:
            write("Invalid amount.")
            return True
        result = service.withdraw(name, amount)
        if result.ok:
            write("Withdrawal successful.")
        else:
            write(f"Error: {WITHDRAWAL_ERRORS.get(result.error_kind, result.message)}")
    elif choice == "S":
        write(account.display())
    elif choice == "H":
        for line in service.history_report(name):
            write(line)
    elif choice == "I":
        if supports_interest(account):
            service.apply_interest(name)
            write("Interest applied.")
        else:
            write("This account does not support interest calculation.")
    elif choice == "E":
        return False
    else:
        write("Invalid choice.")
    return True


def run_console(
    service: BankingService,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Drive the ledger from line-based input until the user quits.

    Each round asks for an owner name, then for one operation on that
    owner's account. Typing ``exit`` at the name prompt, choosing ``E``,
    or reaching end of input ends the session.
    """
    while True:
        try:
            if not _run_round(service, read, write):
                return
        except EOFError:
            return


def main() -> None:
    """Console entry point; seeds sample accounts unless disabled in settings."""
    setup_logging()
    context = get_app_context()
    logger.info("Starting ledger console with %d accounts", len(context.accounts))
    run_console(context.banking)


if __name__ == "__main__":
    main()
