"""Calendar dates limited to the years 1902–2037, with Spanish long format."""

from __future__ import annotations

import datetime
import re
from functools import total_ordering
from typing import IO

_DIAS_SEMANA = ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo")
_MESES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)
_DIAS_MES = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# sscanf("%d/%d/%d"): whitespace may precede each number; trailing text is ignored.
_FORMATO = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")

_ANCHO_LECTURA = 10


class Invalida(Exception):
    """Raised when a date cannot be built or leaves the allowed range."""

    def __init__(self, motivo: str) -> None:
        super().__init__(motivo)
        self._motivo = motivo

    def por_que(self) -> str:
        return self._motivo


def _es_bisiesto(anno: int) -> bool:
    return (anno % 4 == 0 and anno % 100 != 0) or anno % 400 == 0


@total_ordering
class Fecha:
    """An immutable date; a zero day, month or year stands for today's."""

    ANNO_MINIMO = 1902
    ANNO_MAXIMO = 2037

    __slots__ = ("_dia", "_mes", "_anno")

    def __init__(self, dia: int = 0, mes: int = 0, anno: int = 0) -> None:
        if dia == 0 or mes == 0 or anno == 0:
            hoy = datetime.date.today()
            dia = dia or hoy.day
            mes = mes or hoy.month
            anno = anno or hoy.year
        self._dia = dia
        self._mes = mes
        self._anno = anno
        if not self._valida():
            raise Invalida("Fecha inválida")

    @classmethod
    def desde_cadena(cls, texto: str) -> "Fecha":
        """Parse a date written as ``D/M/A``."""
        if not texto:
            raise Invalida("Cadena de fecha vacía")
        coincidencia = _FORMATO.match(texto)
        if coincidencia is None:
            raise Invalida("Formato de fecha inválido")
        d, m, a = (int(g) for g in coincidencia.groups())
        return cls(d, m, a)

    def _valida(self) -> bool:
        if not 1 <= self._mes <= 12:
            return False
        dias_en_mes = _DIAS_MES[self._mes - 1]
        if self._mes == 2 and _es_bisiesto(self._anno):
            dias_en_mes = 29
        if not self.ANNO_MINIMO <= self._anno <= self.ANNO_MAXIMO:
            return False
        return 1 <= self._dia <= dias_en_mes

    def dia(self) -> int:
        return self._dia

    def mes(self) -> int:
        return self._mes

    def anno(self) -> int:
        return self._anno

    def _como_date(self) -> datetime.date:
        return datetime.date(self._anno, self._mes, self._dia)

    def _clave(self) -> tuple[int, int, int]:
        return (self._anno, self._mes, self._dia)

    def __eq__(self, otra: object) -> bool:
        if not isinstance(otra, Fecha):
            return NotImplemented
        return self._clave() == otra._clave()

    def __lt__(self, otra: object) -> bool:
        if not isinstance(otra, Fecha):
            return NotImplemented
        return self._clave() < otra._clave()

    def __hash__(self) -> int:
        return hash(self._clave())

    def __add__(self, n: int) -> "Fecha":
        if not isinstance(n, int):
            return NotImplemented
        try:
            nueva = self._como_date() + datetime.timedelta(days=n)
        except OverflowError:
            raise Invalida("Desbordamiento sobre AnnoMaximo o AnnoMinimo") from None
        if not self.ANNO_MINIMO <= nueva.year <= self.ANNO_MAXIMO:
            raise Invalida("Desbordamiento sobre AnnoMaximo o AnnoMinimo")
        return Fecha(nueva.day, nueva.month, nueva.year)

    def __sub__(self, n: int) -> "Fecha":
        if not isinstance(n, int):
            return NotImplemented
        return self + (-n)

    def __iadd__(self, n: int) -> "Fecha":
        return self.__add__(n)

    def __isub__(self, n: int) -> "Fecha":
        return self.__sub__(n)

    def siguiente(self) -> "Fecha":
        """Return the following day."""
        return self + 1

    def anterior(self) -> "Fecha":
        """Return the previous day."""
        return self - 1

    def cadena(self) -> str:
        """Long form, e.g. ``lunes 3 de marzo de 2025``."""
        dia_semana = _DIAS_SEMANA[self._como_date().weekday()]
        return f"{dia_semana} {self._dia} de {_MESES[self._mes - 1]} de {self._anno:04d}"

    def __str__(self) -> str:
        return self.cadena()

    def __repr__(self) -> str:
        return f"Fecha({self._dia}, {self._mes}, {self._anno})"


def leer_fecha(flujo: IO[str]) -> Fecha:
    """Read one whitespace-delimited word of at most 10 characters as a date.

    Raises EOFError when only whitespace remains and Invalida when the
    word is not a valid date. On seekable streams the character that
    ends the word is left unread.
    """
    seekable = flujo.seekable()

    while True:
        c = flujo.read(1)
        if not c:
            raise EOFError("no hay fecha que leer")
        if not c.isspace():
            break

    palabra = [c]
    while len(palabra) < _ANCHO_LECTURA:
        pos = flujo.tell() if seekable else None
        c = flujo.read(1)
        if not c:
            break
        if c.isspace():
            if pos is not None:
                flujo.seek(pos)
            break
        palabra.append(c)
    return Fecha.desde_cadena("".join(palabra))