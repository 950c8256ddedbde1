from .transactions import (  # noqa: F401
    Summary,
    SummaryResponse,
    TransactionCreate,
    TransactionList,
    TransactionLookup,
    TransactionRead,
    TransactionType,
)
