# libreria

Building blocks for a small bookshop: strings, dates, catalogue items,
payment cards and users with shopping carts. Messages and printed forms
are in Spanish.

## Modules

### `libreria.cadena`

- `Cadena`: a mutable character string. It can be built from a `str` or
  another `Cadena`, or with `Cadena.repetida(n, caracter)`. It supports
  `len()`/`length()`, comparison with `Cadena` and `str`, hashing,
  concatenation with `+` and `+=`, indexing and item assignment,
  iteration and `reversed()`.
  - `at(i)` returns the character at `i` and raises `IndexError` when `i`
    is out of range.
  - `substr(i, tam)` returns `tam` characters starting at `i` and raises
    `IndexError` when they do not fit.
- `leer_cadena(flujo)`: reads one whitespace-delimited word of at most 32
  characters from a text stream, skipping leading whitespace. It raises
  `EOFError` when nothing but whitespace remains.

### `libreria.fecha`

- `Fecha(dia, mes, anno)`: an immutable date between `Fecha.ANNO_MINIMO`
  (1902) and `Fecha.ANNO_MAXIMO` (2037). A zero day, month or year, or
  leaving it out, stands for today's. Invalid dates raise `Invalida`,
  whose `por_que()` gives the reason.
  - `Fecha.desde_cadena("D/M/A")` parses a date; zeros again mean today's.
  - `dia()`, `mes()`, `anno()` return the parts.
  - `+ n` and `- n` add or subtract days and return a new date;
    `siguiente()` and `anterior()` give the next and previous day.
    Leaving the allowed years raises `Invalida`.
  - Dates compare and hash by their value.
  - `cadena()` and `str()` give the long form, e.g.
    `lunes 1 de enero de 2024`.
- `leer_fecha(flujo)`: reads one word of at most 10 characters from a text
  stream and parses it as a date. It raises `EOFError` at end of input and
  `Invalida` for a bad date.

### `libreria.articulo`

- `Articulo(referencia, titulo, f_publi, precio, stock=0)`: a catalogue
  item. `referencia`, `titulo` and `f_publi` are read-only; `precio` and
  `stock` may be changed. `f_publi` may be a `Fecha` or a `"D/M/A"`
  string. `str()` gives `[ref] "title", year. price €` with two decimals.

### `libreria.tarjeta`

- `luhn(numero)`: the Luhn checksum test on a string of digits.
- `Numero(texto)`: a card number. Whitespace is removed; the rest must be
  13 to 19 digits passing the Luhn check, or `NumeroIncorrecto` is raised
  with `razon` set to `Razon.DIGITOS`, `Razon.LONGITUD` or
  `Razon.NO_VALIDO`.
- `Tipo`: the card type, worked out from the leading digits
  (`AmericanExpress`, `JCB`, `VISA`, `Mastercard`, `Maestro`, `Otro`).
- `Tarjeta(numero, titular, caducidad)`: a card owned by a `Usuario`.
  Creating one raises `Caducada` if the expiry date is already past and
  `NumDuplicado` if another live card has the same number; otherwise the
  card is recorded with its holder. It has `numero`, `titular`,
  `caducidad`, `tipo` and a settable `activa`. `anula_titular()` detaches
  it from its holder and deactivates it; `eliminar()` detaches it and
  frees its number for reuse.

### `libreria.usuario`

- `Clave(texto)`: a password kept only in DES-crypt form with a random
  two-character salt. Fewer than 5 bytes raises `ClaveIncorrecta` with
  `RazonClave.CORTA`. `clave` gives the encrypted form and `verifica(texto)`
  checks a plain-text password.
- `Usuario(id, nombre, apellidos, direccion, clave)`: a user; the
  identifier must be unique among live users or `IdDuplicado` is raised.
  - `tarjetas` gives the user's cards ordered by number; `es_titular_de`
    and `no_es_titular_de` add and remove them.
  - `compra(articulo, cantidad=1)` sets an item's quantity in the cart
    (zero removes it); `carrito`, `n_articulos()` and `vaciar_carro()`
    read and clear the cart.
  - `eliminar()` cancels all the user's cards and frees the identifier.
- `mostrar_carro(flujo, usuario)`: writes the cart to a text stream.

## Installation

```
pip install .
```

## Example

```python
import sys

from libreria.articulo import Articulo
from libreria.fecha import Fecha
from libreria.tarjeta import Numero, NumeroIncorrecto
from libreria.usuario import Clave, Usuario, mostrar_carro

lucas = Usuario("lucas", "Lucas", "Grijander", "Avda. del Atún, 1", Clave("password"))

libro = Articulo("111", "Las brujas de Salem", Fecha.desde_cadena("17/10/1975"), 42.10, 300)
lucas.compra(libro, 2)
mostrar_carro(sys.stdout, lucas)

print(Fecha(1, 1, 2024))          # lunes 1 de enero de 2024

try:
    Numero("123")
except NumeroIncorrecto as e:
    print(e.razon)                # Razon.LONGITUD
```

## What it does not do

The package has no orders, invoices or payments: cards are validated and
linked to users, and carts are kept, but nothing is charged or sold.
Everything lives in memory; there is no storage, and there is no
command-line program.

## Tests

```
pip install .[test]
pytest
```