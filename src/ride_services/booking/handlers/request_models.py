from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ride_services.booking.domain.enum import TaxiTier
from ride_services.shared.utils import to_decimal


class LocationRequest(BaseModel):
    """地点の入力スキーマ"""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    address: str | None = None


class CreateBookingRequest(BaseModel):
    """配車予約リクエストスキーマ"""

    user_name: str = Field(default="", max_length=100)
    user_phone: str = Field(..., min_length=1, max_length=32, examples=["555-0100"])
    start_location: LocationRequest
    end_location: LocationRequest
    tier: TaxiTier = Field(..., examples=["economy", "premium"])
    distance: Decimal = Field(..., ge=0, description="距離（km）")
    fare: Decimal = Field(..., ge=0, description="料金")

    @field_validator("distance", "fare", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_name": "Taro",
                    "user_phone": "555-0100",
                    "start_location": {"lat": 35.681, "lng": 139.767},
                    "end_location": {
                        "lat": 35.658,
                        "lng": 139.701,
                        "address": "Shibuya",
                    },
                    "tier": "economy",
                    "distance": 7.4,
                    "fare": 2450,
                }
            ]
        }
    }


class UpdateBookingStatusRequest(BaseModel):
    """ステータス更新リクエストモデル（値の妥当性は検証しない）"""

    status: str = Field(..., min_length=1)
