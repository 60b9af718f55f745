"""Mutable character string with bounds-checked access and word extraction."""

from __future__ import annotations

from functools import total_ordering
from typing import IO, Iterator

_ANCHO_MAXIMO = 32


def _texto(valor: object) -> str | None:
    if isinstance(valor, Cadena):
        return valor._s
    if isinstance(valor, str):
        return valor
    return None


@total_ordering
class Cadena:
    """A mutable sequence of characters compared in code-point order."""

    __slots__ = ("_s",)

    def __init__(self, texto: "str | Cadena" = "") -> None:
        valor = _texto(texto)
        if valor is None:
            raise TypeError(f"no se puede construir una Cadena desde {type(texto).__name__}")
        self._s = valor

    @classmethod
    def repetida(cls, n: int = 0, caracter: str = " ") -> "Cadena":
        """Build a string made of ``n`` copies of ``caracter``."""
        if n < 0:
            raise ValueError("la longitud no puede ser negativa")
        if not isinstance(caracter, str) or len(caracter) != 1:
            raise ValueError("se esperaba un único carácter")
        return cls(caracter * n)

    def length(self) -> int:
        return len(self._s)

    def __len__(self) -> int:
        return len(self._s)

    def __str__(self) -> str:
        return self._s

    def __repr__(self) -> str:
        return f"Cadena({self._s!r})"

    def __eq__(self, otra: object) -> bool:
        valor = _texto(otra)
        if valor is None:
            return NotImplemented
        return self._s == valor

    def __lt__(self, otra: object) -> bool:
        valor = _texto(otra)
        if valor is None:
            return NotImplemented
        return self._s < valor

    def __hash__(self) -> int:
        return hash(self._s)

    def __add__(self, otra: "str | Cadena") -> "Cadena":
        valor = _texto(otra)
        if valor is None:
            return NotImplemented
        return Cadena(self._s + valor)

    def __radd__(self, otra: str) -> "Cadena":
        valor = _texto(otra)
        if valor is None:
            return NotImplemented
        return Cadena(valor + self._s)

    def __iadd__(self, otra: "str | Cadena") -> "Cadena":
        valor = _texto(otra)
        if valor is None:
            return NotImplemented
        self._s += valor
        return self

    def __getitem__(self, i: int) -> str:
        return self._s[i]

    def __setitem__(self, i: int, caracter: str) -> None:
        if not isinstance(caracter, str) or len(caracter) != 1:
            raise ValueError("se esperaba un único carácter")
        indice = range(len(self._s))[i]
        self._s = self._s[:indice] + caracter + self._s[indice + 1:]

    def __iter__(self) -> Iterator[str]:
        return iter(self._s)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._s)

    def at(self, i: int) -> str:
        """Return the character at ``i``, raising IndexError when out of range."""
        if i < 0 or i >= len(self._s):
            raise IndexError("Indice fuera de rango")
        return self._s[i]

    def substr(self, i: int, tam: int) -> "Cadena":
        """Return the ``tam`` characters starting at index ``i``."""
        if i < 0 or tam < 0 or i >= len(self._s) or len(self._s) - i < tam:
            raise IndexError(
                "Indice fuera de rango o tamaño de la cadena supera los "
                "caracteres desde el indice"
            )
        return Cadena(self._s[i:i + tam])


def leer_cadena(flujo: IO[str]) -> Cadena:
    """Read one whitespace-delimited word of at most 32 characters.

    Leading whitespace is skipped. Raises EOFError when nothing but
    whitespace remains. On seekable streams the character that ends the
    word is left unread.
    """
    seekable = flujo.seekable()

    while True:
        pos = flujo.tell() if seekable else None
        c = flujo.read(1)
        if not c:
            raise EOFError("no hay palabra que leer")
        if not c.isspace():
            break

    palabra = [c]
    while len(palabra) < _ANCHO_MAXIMO:
        pos = flujo.tell() if seekable else None
        c = flujo.read(1)
        if not c:
            break
        if c.isspace():
            if pos is not None:
                flujo.seek(pos)
            break
        palabra.append(c)
    return Cadena("".join(palabra))