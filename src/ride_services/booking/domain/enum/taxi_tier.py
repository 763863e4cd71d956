from enum import Enum


class TaxiTier(str, Enum):
    """車両クラス"""

    ECONOMY = "economy"
    STANDARD = "standard"
    PREMIUM = "premium"
