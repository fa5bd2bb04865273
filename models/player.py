"""Datenmodell für einen Spieler (Pydantic v2)."""

from pydantic import BaseModel, field_validator


class Player(BaseModel):
    """Ein Spieler mit persönlichem Passcode."""

    id: str
    nickname: str
    passcode: str   # wird normalisiert zu UPPERCASE

    @field_validator("passcode")
    @classmethod
    def normalize_passcode(cls, v: str) -> str:
        return v.upper()
