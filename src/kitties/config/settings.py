"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from kitties.config import KittiesSettings, GenesisConfig

    # Load from environment variables (KITTIES_*)
    settings = KittiesSettings()

    # Or override with explicit values
    settings = KittiesSettings(id_bits=8, atomic_exchange=True)
    genesis = GenesisConfig(balances={"alice": 1_000}, prices={0: 100})
"""

from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class KittiesSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a KittiesModule.

    Attributes:
        id_bits: Width of the unsigned kitty id type.
        balance_bits: Width of the unsigned balance type.
        random_seed: Hex-encoded global seed for LocalRandomness.
        atomic_exchange: Keep listings on rejected exchanges instead of
            consuming them.
        log_level: Level applied to the "kitties" logger by configure_logging.

    Environment Variables:
        KITTIES_ID_BITS
        KITTIES_BALANCE_BITS
        KITTIES_RANDOM_SEED
        KITTIES_ATOMIC_EXCHANGE
        KITTIES_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="KITTIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    id_bits: int = Field(default=32, ge=1, le=128)
    balance_bits: int = Field(default=128, ge=1, le=256)
    random_seed: str = "00" * 32
    atomic_exchange: bool = False
    log_level: str = "INFO"

    @field_validator("random_seed")
    @classmethod
    def validate_seed(cls, value: str) -> str:
        bytes.fromhex(value)
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def max_kitty_id(self) -> int:
        return 2**self.id_bits - 1

    @property
    def max_balance(self) -> int:
        return 2**self.balance_bits - 1

    @property
    def seed_bytes(self) -> bytes:
        return bytes.fromhex(self.random_seed)


class GenesisConfig(BaseModel):
    """Initial state applied when a store is created.

    Attributes:
        balances: Account balances present at start.
        prices: Listings present at start, keyed by kitty id.
        next_kitty_id: Initial value of the id counter.
    """

    balances: dict[str, NonNegativeInt] = Field(default_factory=dict)
    prices: dict[NonNegativeInt, NonNegativeInt] = Field(default_factory=dict)
    next_kitty_id: NonNegativeInt = 0

    def check_bounds(self, settings: KittiesSettings) -> None:
        """Verify genesis values fit the id and balance ranges of settings.

        Raises:
            ValueError: If a balance or price exceeds settings.max_balance, or
                next_kitty_id exceeds settings.max_kitty_id.
        """
        if self.next_kitty_id > settings.max_kitty_id:
            raise ValueError(
                f"next_kitty_id {self.next_kitty_id} exceeds max kitty id {settings.max_kitty_id}"
            )
        for account, balance in self.balances.items():
            if balance > settings.max_balance:
                raise ValueError(
                    f"Balance {balance} of {account!r} exceeds max balance {settings.max_balance}"
                )
        for kitty_id, price in self.prices.items():
            if price > settings.max_balance:
                raise ValueError(
                    f"Price {price} of kitty {kitty_id} exceeds max balance {settings.max_balance}"
                )
