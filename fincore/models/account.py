"""Account model: a holder-named balance store in checking or savings flavour."""

from decimal import Decimal

from fincore.exceptions import (
    InsufficientFundsError,
    InvalidAccountTypeError,
    InvalidAmountError,
)
from fincore.logging import get_logger
from fincore.models.enums import AccountType
from fincore.money import Amount, format_currency, format_rate, to_decimal

logger = get_logger(__name__)


class Account:
    """Bank account holding a balance for a named holder.

    The account type is a tag rather than a subclass:
    - CHECKING: deposit and withdraw only
    - SAVINGS: additionally carries an interest rate and accrues interest

    Construction stores its inputs verbatim. A negative initial balance or a
    negative interest rate is accepted here; only the mutators validate.

    Accounts compare by identity. Two accounts with the same holder and
    balance are distinct.
    """

    def __init__(
        self,
        holder: str,
        initial_balance: Amount = Decimal("0"),
        account_type: AccountType = AccountType.CHECKING,
        interest_rate: Amount | None = None,
    ) -> None:
        if account_type == AccountType.CHECKING and interest_rate is not None:
            raise InvalidAccountTypeError("Checking accounts do not carry an interest rate")

        self._holder = holder
        self._balance = to_decimal(initial_balance)
        self._account_type = AccountType(account_type)
        self._interest_rate: Decimal | None = None
        if self._account_type == AccountType.SAVINGS:
            rate = interest_rate if interest_rate is not None else Decimal("0")
            self._interest_rate = to_decimal(rate)

    @classmethod
    def checking(cls, holder: str, initial_balance: Amount = Decimal("0")) -> "Account":
        """Open a checking account."""
        return cls(holder, initial_balance)

    @classmethod
    def savings(
        cls,
        holder: str,
        initial_balance: Amount = Decimal("0"),
        interest_rate: Amount = Decimal("0"),
    ) -> "Account":
        """Open a savings account.

        Parameters
        ----------
        holder : str
            Account holder name.
        initial_balance : Amount
            Opening balance, stored as given.
        interest_rate : Amount
            Rate as a fraction (``0.05`` is 5%), stored as given.
        """
        return cls(holder, initial_balance, AccountType.SAVINGS, interest_rate)

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def is_savings(self) -> bool:
        return self._account_type == AccountType.SAVINGS

    @property
    def interest_rate(self) -> Decimal | None:
        """Interest rate for savings accounts, ``None`` for checking."""
        return self._interest_rate

    def deposit(self, amount: Amount) -> bool:
        """Add ``amount`` to the balance.

        Returns
        -------
        bool
            True if the amount was a positive finite number and applied,
            False otherwise.
        """
        value = to_decimal(amount)
        if not value.is_finite() or value <= 0:
            logger.debug("Rejected deposit of %s for %s", value, self._holder)
            return False
        self._balance += value
        return True

    def withdraw(self, amount: Amount) -> None:
        """Take ``amount`` out of the balance.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is zero, negative or not a finite number.
        InsufficientFundsError
            If ``amount`` exceeds the current balance.
        """
        value = to_decimal(amount)
        self._check_withdrawal(value)
        self._balance -= value

    def try_withdraw(self, amount: Amount) -> bool:
        """Take ``amount`` out of the balance, reporting failure as ``False``."""
        try:
            self.withdraw(amount)
        except (InvalidAmountError, InsufficientFundsError) as e:
            logger.debug("Rejected withdrawal for %s: %s", self._holder, e)
            return False
        return True

    def _check_withdrawal(self, value: Decimal) -> None:
        if not value.is_finite() or value <= 0:
            raise InvalidAmountError(value)
        if value > self._balance:
            raise InsufficientFundsError(value, self._balance)

    def set_interest_rate(self, rate: Amount) -> None:
        """Update the interest rate. Negative or non-finite rates are ignored."""
        self._require_savings("set_interest_rate")
        value = to_decimal(rate)
        if not value.is_finite() or value < 0:
            logger.debug("Ignored interest rate %s for %s", value, self._holder)
            return
        self._interest_rate = value

    def apply_interest(self) -> Decimal:
        """Accrue one period of interest on the current balance.

        The interest is routed through :meth:`deposit`, so repeated calls
        compound. A negative rate set at construction produces negative
        interest, which the deposit refuses.

        Returns
        -------
        Decimal
            The interest credited to the balance, zero when the deposit
            refused it.
        """
        self._require_savings("apply_interest")
        interest = self._balance * self._interest_rate
        if not self.deposit(interest):
            logger.debug("Interest %s refused for %s", interest, self._holder)
            return Decimal("0")
        logger.debug(
            "Applied interest %s to %s, new balance %s", interest, self._holder, self._balance
        )
        return interest

    def _require_savings(self, operation: str) -> None:
        if not self.is_savings:
            raise InvalidAccountTypeError(
                f"{operation} requires a savings account, got {self._account_type.value}"
            )

    def describe(self, currency_symbol: str = "$") -> str:
        """Multi-line balance summary for display."""
        title = "Savings Account Balance" if self.is_savings else "Account Balance"
        lines = [
            f"=== {title} ===",
            f"Account Holder: {self._holder}",
            f"Current Balance: {format_currency(self._balance, currency_symbol)}",
        ]
        if self.is_savings:
            lines.append(f"Interest Rate: {format_rate(self._interest_rate)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        if self.is_savings:
            return (
                f"SavingsAccount[holder={self._holder}, balance={format_currency(self._balance)}, "
                f"interestRate={format_rate(self._interest_rate)}]"
            )
        return f"Account[holder={self._holder}, balance={format_currency(self._balance)}]"

    def __repr__(self) -> str:
        return (
            f"Account(holder={self._holder!r}, balance={self._balance!r}, "
            f"account_type={self._account_type.value!r}, interest_rate={self._interest_rate!r})"
        )


def SavingsAccount(
    holder: str,
    initial_balance: Amount = Decimal("0"),
    interest_rate: Amount = Decimal("0"),
) -> Account:
    """Open a savings account; shorthand for :meth:`Account.savings`."""
    return Account.savings(holder, initial_balance, interest_rate)
