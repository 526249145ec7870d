"""
Address — каноническое представление адреса аккаунта / токена

Адреса приходят из фидов и пользовательского ввода как строки в произвольном
регистре (lowercase, uppercase, EIP-55 checksum). Сравнение строк напрямую
даёт ложные несовпадения, поэтому все сравнения выполняются на канонической
форме: 20 байт.

Правила разбора (совпадают с web3-utils isAddress):
- hex-строка из 40 символов, префикс 0x опционален
- пробелы по краям обрезаются
- смешанный регистр допустим только с корректной checksum (EIP-55)
- 20 сырых байт принимаются как есть
"""

from typing import Any, Final

from eth_utils import (
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex_address,
    remove_0x_prefix,
    to_canonical_address,
    to_checksum_address,
)
from pydantic_core import core_schema

# Длина адреса в байтах
ADDRESS_SIZE_BYTES: Final[int] = 20


class InvalidAddressError(ValueError):
    """Строка / байты не являются корректным адресом."""

    pass


class Address:
    """
    Immutable адрес фиксированной ширины (20 байт).

    Создаётся только через Address.parse (валидирующий конструктор).
    Равенство и хэш — по байтам, str() — checksum форма.
    """

    __slots__ = ("_value",)

    def __init__(self, value: bytes):
        if not isinstance(value, bytes) or len(value) != ADDRESS_SIZE_BYTES:
            raise InvalidAddressError(
                f"Address requires exactly {ADDRESS_SIZE_BYTES} bytes, got {value!r}"
            )
        self._value = value

    @classmethod
    def parse(cls, value: Any) -> "Address":
        """
        Разбор адреса из Address / bytes / hex-строки.

        Args:
            value: Исходное значение

        Returns:
            Address в канонической форме

        Raises:
            InvalidAddressError: Если value не является корректным адресом
        """
        if isinstance(value, Address):
            return value

        if isinstance(value, bytes):
            return cls(value)

        if not isinstance(value, str):
            raise InvalidAddressError(f"Unsupported address type: {type(value).__name__}")

        text = value.strip()
        if not is_hex_address(text):
            raise InvalidAddressError(f"Not a valid address: {value!r}")

        # Смешанный регистр = EIP-55 checksum, она обязана совпасть
        if is_checksum_formatted_address(text) and not is_checksum_address(
            "0x" + remove_0x_prefix(text)
        ):
            raise InvalidAddressError(f"Invalid address checksum: {value!r}")

        return cls(to_canonical_address(text))

    @classmethod
    def try_parse(cls, value: Any) -> "Address | None":
        """Разбор без exception: None для невалидного ввода."""
        try:
            return cls.parse(value)
        except InvalidAddressError:
            return None

    @property
    def canonical(self) -> bytes:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Address):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return to_checksum_address(self._value)

    def __repr__(self) -> str:
        return f"Address('{self}')"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        # Поле модели принимает str / bytes / Address, сериализуется в checksum строку
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.to_string_ser_schema(),
        )


def is_valid_address(value: Any) -> bool:
    """Проверка корректности адреса без exception."""
    return Address.try_parse(value) is not None


def addresses_equal(first: Any, second: Any) -> bool:
    """
    Каноническое сравнение двух адресов.

    Невалидный адрес не равен ничему (включая другой невалидный адрес).
    """
    first_address = Address.try_parse(first)
    second_address = Address.try_parse(second)

    if first_address is None or second_address is None:
        return False

    return first_address == second_address
