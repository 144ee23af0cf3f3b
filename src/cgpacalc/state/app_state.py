from dataclasses import dataclass, field
from typing import Optional

from cgpacalc.core.ledger import CourseLedger, LedgerChange


@dataclass
class AppState:
    ledger: CourseLedger = field(default_factory=CourseLedger)
    last_message: Optional[str] = None

    def apply(self, change: LedgerChange) -> LedgerChange:
        self.last_message = change.message
        return change
