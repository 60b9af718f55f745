"""Catalogue items: reference, title, publication date, price and stock."""

from __future__ import annotations

from libreria.cadena import Cadena
from libreria.fecha import Fecha


class Articulo:
    """An item for sale. Price and stock may change; the rest may not."""

    __slots__ = ("_referencia", "_titulo", "_f_publi", "precio", "stock")

    def __init__(
        self,
        referencia: "str | Cadena",
        titulo: "str | Cadena",
        f_publi: "Fecha | str",
        precio: float,
        stock: int = 0,
    ) -> None:
        self._referencia = Cadena(referencia)
        self._titulo = Cadena(titulo)
        self._f_publi = f_publi if isinstance(f_publi, Fecha) else Fecha.desde_cadena(f_publi)
        self.precio = float(precio)
        self.stock = int(stock)

    @property
    def referencia(self) -> Cadena:
        return Cadena(self._referencia)

    @property
    def titulo(self) -> Cadena:
        return Cadena(self._titulo)

    @property
    def f_publi(self) -> Fecha:
        return self._f_publi

    def __str__(self) -> str:
        return (
            f'[{self._referencia}] "{self._titulo}", '
            f"{self._f_publi.anno()}. {self.precio:.2f} €"
        )