"""원장 패키지

  Ledger         - book / cancel / find / list / availability
  BookingListing - 지연 평가되는 예약 목록 뷰
  LedgerMetrics  - 세션 집계
"""

from railbook.ledger.core import BookingListing, Ledger
from railbook.ledger.metrics import LedgerMetrics

__all__ = [
    "BookingListing",
    "Ledger",
    "LedgerMetrics",
]
