"""Users with encrypted passwords, their cards and their shopping carts."""

from __future__ import annotations

import enum
import secrets
from typing import IO, TYPE_CHECKING, ClassVar

from passlib.hash import des_crypt

from libreria.cadena import Cadena

if TYPE_CHECKING:
    from libreria.articulo import Articulo
    from libreria.tarjeta import Numero, Tarjeta

_CARACTERES_VALIDOS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789./"
_LONGITUD_MINIMA = 5


class RazonClave(enum.Enum):
    CORTA = enum.auto()
    ERROR_CRYPT = enum.auto()


class ClaveIncorrecta(Exception):
    """Raised when a password is too short or cannot be encrypted."""

    def __init__(self, razon: RazonClave) -> None:
        super().__init__(razon.name)
        self.razon = razon


class Clave:
    """A password stored only in its DES-crypt encrypted form."""

    __slots__ = ("_clave",)

    def __init__(self, texto: "str | Cadena") -> None:
        texto = str(texto)
        if len(texto.encode("utf-8")) < _LONGITUD_MINIMA:
            raise ClaveIncorrecta(RazonClave.CORTA)
        sal = "".join(secrets.choice(_CARACTERES_VALIDOS) for _ in range(2))
        try:
            cifrada = des_crypt.using(salt=sal).hash(texto)
        except (ValueError, TypeError):
            raise ClaveIncorrecta(RazonClave.ERROR_CRYPT) from None
        self._clave = Cadena(cifrada)

    @property
    def clave(self) -> Cadena:
        """The encrypted password."""
        return Cadena(self._clave)

    def verifica(self, texto: "str | Cadena") -> bool:
        """Return whether the plain-text password matches."""
        try:
            return bool(des_crypt.verify(str(texto), str(self._clave)))
        except (ValueError, TypeError):
            return False


class IdDuplicado(Exception):
    """Raised when a user identifier is already taken."""

    def __init__(self, idd: Cadena) -> None:
        super().__init__(f"Identificador duplicado: {idd}")
        self.idd = idd


class Usuario:
    """A registered user. Identifiers are unique among live users."""

    _ids: ClassVar[set[Cadena]] = set()

    def __init__(
        self,
        id: "str | Cadena",
        nombre: "str | Cadena",
        apellidos: "str | Cadena",
        direccion: "str | Cadena",
        clave: "Clave | str",
    ) -> None:
        clave = clave if isinstance(clave, Clave) else Clave(clave)
        identificador = Cadena(id)
        if identificador in Usuario._ids:
            raise IdDuplicado(Cadena(identificador))
        Usuario._ids.add(identificador)
        self._id = identificador
        self._nombre = Cadena(nombre)
        self._apellidos = Cadena(apellidos)
        self._direccion = Cadena(direccion)
        self._clave = clave
        self._tarjetas: dict[Numero, Tarjeta] = {}
        self._articulos: dict[Articulo, int] = {}

    @property
    def id(self) -> Cadena:
        return Cadena(self._id)

    @property
    def nombre(self) -> Cadena:
        return Cadena(self._nombre)

    @property
    def apellidos(self) -> Cadena:
        return Cadena(self._apellidos)

    @property
    def direccion(self) -> Cadena:
        return Cadena(self._direccion)

    @property
    def tarjetas(self) -> "dict[Numero, Tarjeta]":
        """The user's cards, ordered by number."""
        return dict(sorted(self._tarjetas.items()))

    @property
    def carrito(self) -> "dict[Articulo, int]":
        """The items in the cart with their quantities."""
        return dict(self._articulos)

    def es_titular_de(self, tarjeta: "Tarjeta") -> None:
        """Record the card unless it belongs to another user."""
        if tarjeta.titular is not None and tarjeta.titular is not self:
            return
        self._tarjetas.setdefault(tarjeta.numero, tarjeta)

    def no_es_titular_de(self, tarjeta: "Tarjeta") -> None:
        self._tarjetas.pop(tarjeta.numero, None)

    def compra(self, articulo: "Articulo", cantidad: int = 1) -> None:
        """Set the quantity of an item in the cart; zero removes it."""
        if cantidad < 0:
            raise ValueError("la cantidad no puede ser negativa")
        if cantidad == 0:
            self._articulos.pop(articulo, None)
        else:
            self._articulos[articulo] = cantidad

    def vaciar_carro(self) -> None:
        self._articulos.clear()

    def n_articulos(self) -> int:
        """Number of distinct items in the cart."""
        return len(self._articulos)

    def eliminar(self) -> None:
        """Withdraw the user: cancel every card and free the identifier."""
        for tarjeta in list(self._tarjetas.values()):
            tarjeta.anula_titular()
        Usuario._ids.discard(self._id)

    def __str__(self) -> str:
        partes = [
            f"{self._id} [{self._clave.clave}] {self._nombre} {self._apellidos}\n",
            f"{self._direccion}\n",
            "Tarjetas:\n",
        ]
        partes.extend(f"{tarjeta}\n" for tarjeta in self.tarjetas.values())
        return "".join(partes)


def mostrar_carro(flujo: IO[str], usuario: Usuario) -> IO[str]:
    """Write the user's cart to ``flujo`` and return it."""
    flujo.write(
        f"Carrito de compra de {usuario.id} [Artículos: {usuario.n_articulos()}]\n"
        "    Cant. Artículo\n"
        "===========================================================\n"
    )
    for articulo, cantidad in usuario.carrito.items():
        flujo.write(f"    {cantidad}    {articulo}\n")
    return flujo