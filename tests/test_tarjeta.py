import pytest

from libreria.fecha import Fecha, Invalida
from libreria.tarjeta import (
    Caducada,
    Numero,
    NumeroIncorrecto,
    NumDuplicado,
    Razon,
    Tarjeta,
    Tipo,
    luhn,
)
from libreria.usuario import Usuario

VISA = "4" + "0" * 11 + "6"
MASTERCARD = "5" + "0" * 11 + "5"
MAESTRO = "6" + "0" * 11 + "4"
AMEX_34 = "34" + "0" * 10 + "9"
AMEX_37 = "37" + "0" * 10 + "2"
JCB = "35" + "0" * 10 + "6"
OTRO = "1" + "0" * 11 + "9"


@pytest.fixture
def usuario():
    u = Usuario("lucas_t", "Lucas", "Grijander", "Avda. del Atún, 654 (Barbate)", "password")
    yield u
    u.eliminar()


@pytest.fixture
def nuevas():
    creadas = []

    def crear(numero, titular, caducidad=None):
        t = Tarjeta(Numero(numero), titular, caducidad or Fecha() + 365)
        creadas.append(t)
        return t

    yield crear
    for t in creadas:
        t.eliminar()


@pytest.mark.parametrize("numero", [VISA, MASTERCARD, MAESTRO, AMEX_34, AMEX_37, JCB, OTRO, "0" * 19])
def test_luhn_valido(numero):
    assert luhn(numero) is True


def test_luhn_invalido():
    assert luhn("1" + "0" * 12) is False


def test_numero_quita_espacios():
    assert str(Numero(f" {VISA[:4]} {VISA[4:8]}  {VISA[8:]} ")) == VISA


@pytest.mark.parametrize(
    "texto, razon",
    [
        ("4000 O000 0000 6", Razon.DIGITOS),
        ("123", Razon.LONGITUD),
        ("0" * 20, Razon.LONGITUD),
        ("1" + "0" * 12, Razon.NO_VALIDO),
    ],
)
def test_numero_incorrecto(texto, razon):
    with pytest.raises(NumeroIncorrecto) as e:
        Numero(texto)
    assert e.value.razon is razon


def test_numero_orden_e_igualdad():
    assert Numero(VISA) == Numero(" " + VISA)
    assert Numero(VISA) < Numero(MASTERCARD)
    assert not Numero(MASTERCARD) < Numero(VISA)
    assert hash(Numero(VISA)) == hash(Numero(VISA + " "))


@pytest.mark.parametrize(
    "tipo, texto",
    [
        (Tipo.AmericanExpress, "American Express"),
        (Tipo.VISA, "VISA"),
        (Tipo.Otro, "Tipo indeterminado"),
    ],
)
def test_tipo_str(tipo, texto):
    assert str(tipo) == texto


@pytest.mark.parametrize(
    "numero, tipo",
    [
        (VISA, Tipo.VISA),
        (MASTERCARD, Tipo.Mastercard),
        (MAESTRO, Tipo.Maestro),
        (AMEX_34, Tipo.AmericanExpress),
        (AMEX_37, Tipo.AmericanExpress),
        (JCB, Tipo.JCB),
        (OTRO, Tipo.Otro),
    ],
)
def test_tipo_de_tarjeta(numero, tipo, usuario, nuevas):
    assert nuevas(numero, usuario).tipo is tipo


def test_tarjeta_se_asocia_al_titular(usuario, nuevas):
    t = nuevas(VISA, usuario)
    assert t.titular is usuario
    assert t.activa is True
    assert usuario.tarjetas == {Numero(VISA): t}


def test_activa_modificable(usuario, nuevas):
    t = nuevas(VISA, usuario)
    t.activa = False
    assert t.activa is False


def test_caducada(usuario):
    ayer = Fecha() - 1
    with pytest.raises(Caducada) as e:
        Tarjeta(Numero(VISA), usuario, ayer)
    assert e.value.cuando == ayer
    assert usuario.tarjetas == {}


def test_fecha_de_caducidad_invalida(usuario):
    with pytest.raises(Invalida):
        Tarjeta(Numero(VISA), usuario, "1O/O4/2O28")


def test_numero_duplicado(usuario, nuevas):
    nuevas(VISA, usuario)
    with pytest.raises(NumDuplicado) as e:
        Tarjeta(Numero(VISA), usuario, Fecha() + 30)
    assert e.value.que == Numero(VISA)


def test_eliminar_libera_numero(usuario):
    t = Tarjeta(Numero(VISA), usuario, Fecha() + 30)
    t.eliminar()
    assert t.titular is None
    assert usuario.tarjetas == {}
    otra = Tarjeta(Numero(VISA), usuario, Fecha() + 30)
    try:
        assert otra.numero == Numero(VISA)
    finally:
        otra.eliminar()


def test_anula_titular(usuario, nuevas):
    t = nuevas(VISA, usuario)
    t.anula_titular()
    assert t.titular is None
    assert t.activa is False
    assert usuario.tarjetas == {}


def test_orden_de_tarjetas(usuario, nuevas):
    a = nuevas(VISA, usuario)
    b = nuevas(MASTERCARD, usuario)
    assert a < b
    assert sorted([b, a]) == [a, b]


def test_impresion(usuario, nuevas):
    t = nuevas(VISA, usuario, Fecha(31, 12, 2036))
    lineas = str(t).splitlines()
    assert lineas[0] == "VISA"
    assert lineas[1] == VISA
    assert lineas[2] == "LUCAS GRIJANDER"
    assert lineas[3] == "Caduca:  12/36"