from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """地点（緯度・経度・住所）"""

    lat: float
    lng: float
    address: str | None = None

    def to_dict(self) -> dict:
        """住所が無い場合はキーごと省略する"""
        data: dict = {"lat": self.lat, "lng": self.lng}
        if self.address is not None:
            data["address"] = self.address
        return data

    @classmethod
    def from_dict(cls, data: dict) -> Location:
        return cls(
            lat=float(data["lat"]),
            lng=float(data["lng"]),
            address=data.get("address"),
        )
