"""Payment card numbers and cards bound to their holders."""

from __future__ import annotations

import enum
import string
from typing import TYPE_CHECKING, ClassVar

from libreria.cadena import Cadena
from libreria.fecha import Fecha

if TYPE_CHECKING:
    from libreria.usuario import Usuario

_ESPACIOS = frozenset(string.whitespace)
_DIGITOS = frozenset(string.digits)


def luhn(numero: "str | Cadena") -> bool:
    """Return whether the digit string passes the Luhn checksum."""
    total = 0
    for posicion, caracter in enumerate(reversed(str(numero))):
        digito = int(caracter)
        if posicion % 2:
            digito *= 2
            if digito > 9:
                digito -= 9
        total += digito
    return total % 10 == 0


class Razon(enum.Enum):
    LONGITUD = enum.auto()
    DIGITOS = enum.auto()
    NO_VALIDO = enum.auto()


class NumeroIncorrecto(Exception):
    """Raised when a card number is malformed."""

    def __init__(self, razon: Razon) -> None:
        super().__init__(razon.name)
        self.razon = razon


class Numero:
    """A validated card number: 13 to 19 digits passing the Luhn check."""

    __slots__ = ("_numero",)

    def __init__(self, texto: "str | Cadena") -> None:
        limpio = []
        for caracter in str(texto):
            if caracter in _ESPACIOS:
                continue
            if caracter not in _DIGITOS:
                raise NumeroIncorrecto(Razon.DIGITOS)
            limpio.append(caracter)
        digitos = "".join(limpio)
        if not 13 <= len(digitos) <= 19:
            raise NumeroIncorrecto(Razon.LONGITUD)
        if not luhn(digitos):
            raise NumeroIncorrecto(Razon.NO_VALIDO)
        self._numero = Cadena(digitos)

    def __str__(self) -> str:
        return str(self._numero)

    def __repr__(self) -> str:
        return f"Numero({str(self._numero)!r})"

    def __eq__(self, otro: object) -> bool:
        if not isinstance(otro, Numero):
            return NotImplemented
        return self._numero == otro._numero

    def __lt__(self, otro: object) -> bool:
        if not isinstance(otro, Numero):
            return NotImplemented
        return self._numero < otro._numero

    def __hash__(self) -> int:
        return hash(self._numero)


class Tipo(enum.Enum):
    Otro = enum.auto()
    VISA = enum.auto()
    Mastercard = enum.auto()
    Maestro = enum.auto()
    JCB = enum.auto()
    AmericanExpress = enum.auto()

    def __str__(self) -> str:
        return _NOMBRES_TIPO[self]


_NOMBRES_TIPO = {
    Tipo.AmericanExpress: "American Express",
    Tipo.JCB: "JCB",
    Tipo.Maestro: "Maestro",
    Tipo.Mastercard: "Mastercard",
    Tipo.VISA: "VISA",
    Tipo.Otro: "Tipo indeterminado",
}


class Caducada(Exception):
    """Raised when a card's expiry date is already past."""

    def __init__(self, cuando: Fecha) -> None:
        super().__init__(f"Tarjeta caducada desde el {cuando}")
        self.cuando = cuando


class NumDuplicado(Exception):
    """Raised when a card number is already in use."""

    def __init__(self, que: Numero) -> None:
        super().__init__(f"Número de tarjeta duplicado: {que}")
        self.que = que


def _mayusculas_ascii(texto: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in texto)


class Tarjeta:
    """A payment card. Numbers are unique among live cards."""

    _numeros: ClassVar[set[Numero]] = set()

    def __init__(self, numero: "Numero | str", titular: "Usuario", caducidad: "Fecha | str") -> None:
        numero = numero if isinstance(numero, Numero) else Numero(numero)
        caducidad = caducidad if isinstance(caducidad, Fecha) else Fecha.desde_cadena(caducidad)
        if caducidad < Fecha():
            raise Caducada(caducidad)
        if numero in Tarjeta._numeros:
            raise NumDuplicado(numero)
        Tarjeta._numeros.add(numero)
        self._numero = numero
        self._titular: Usuario | None = titular
        self._caducidad = caducidad
        self._activa = True
        titular.es_titular_de(self)

    @property
    def numero(self) -> Numero:
        return self._numero

    @property
    def titular(self) -> "Usuario | None":
        return self._titular

    @property
    def caducidad(self) -> Fecha:
        return self._caducidad

    @property
    def activa(self) -> bool:
        return self._activa

    @activa.setter
    def activa(self, nuevo: bool) -> None:
        self._activa = bool(nuevo)

    @property
    def tipo(self) -> Tipo:
        num = str(self._numero)
        if num[0] == "3":
            return Tipo.AmericanExpress if num[1] in "47" else Tipo.JCB
        return {"4": Tipo.VISA, "5": Tipo.Mastercard, "6": Tipo.Maestro}.get(num[0], Tipo.Otro)

    def anula_titular(self) -> None:
        """Detach the card from its holder and deactivate it."""
        if self._titular is not None:
            self._titular.no_es_titular_de(self)
            self._titular = None
            self._activa = False

    def eliminar(self) -> None:
        """Withdraw the card: detach it and free its number."""
        if self._titular is not None:
            self._titular.no_es_titular_de(self)
            self._titular = None
        Tarjeta._numeros.discard(self._numero)

    def __lt__(self, otra: object) -> bool:
        if not isinstance(otra, Tarjeta):
            return NotImplemented
        return self._numero < otra._numero

    def __str__(self) -> str:
        if self._titular is not None:
            nombre = _mayusculas_ascii(f"{self._titular.nombre} {self._titular.apellidos}")
        else:
            nombre = ""
        return (
            f"{self.tipo}\n{self._numero}\n{nombre}\n"
            f"Caduca:  {self._caducidad.mes():02d}/{self._caducidad.anno() % 100}\n"
        )