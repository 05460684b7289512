# ftprintf

A compact printf-style formatter. It understands the conversions
`c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%`, together with the flags
`-`, `0`, `#`, ` ` (space) and `+`, a `.precision` and a field width.
Either the precision or the width may be given as `*`, in which case it is
taken from the next argument.

## Installation

```
pip install .
```

## Usage

`ftprintf.printer.format_text` returns the formatted string:

```python
from ftprintf.printer import format_text

format_text("%5d|%-5s|%#x", 42, "hi", 255)
# '   42|hi   |0xff'

format_text("%.3d %+d % d", 7, 5, 5)
# '007 +5  5'

format_text("%*s", 6, "abc")
# '   abc'
```

`ftprintf.printer.ft_printf` writes the formatted text to standard output
and returns the number of characters written:

```python
from ftprintf.printer import ft_printf

count = ft_printf("%s has %u items\n", "cart", 3)
```

### Directive syntax

A directive is `%`, then a run of flag characters (`-`, `0`, `#`, ` `, `+`
and `.precision`, in any order), then an optional width, then the
conversion character. The width is read only after the flag run, so the
precision must come before it: `%.3*d` or `%-.3 8d` work, while in
`%5.3d` the `.` after the width is not a conversion character, so the
directive produces nothing and `.3d` is kept as ordinary text.

### Behaviour notes

- `%s` with `None` prints `(null)`; `%p` with `None` or 0 prints `(nil)`.
  `%p` with an integer prints it as the address in lower-case hex after
  `0x`; any other object is shown by its `id()`.
- `%c` takes a one-character string, or an integer of which the low eight
  bits are used.
- `%d`/`%i` take a 32-bit signed int, `%u`/`%x`/`%X` a 32-bit unsigned int;
  other integer values wrap the way a C `int` or `unsigned int` would.
- A precision of zero with a value of zero prints nothing for the digits.
- `#` adds `0x`/`0X` only to a non-zero hex value; `+` and ` ` apply only
  to `%d` and `%i`.
- `0` pads with zeros only when there is no `-` and no precision; a `-`
  sign stays in front of the zeros.
- A negative `*` width counts as 0; a negative `*` precision counts as no
  precision.
- A directive whose conversion character is not recognised produces nothing
  and takes no argument for the conversion; the character is kept as
  ordinary text. A `%` at the very end of the format produces nothing.

### Errors

- `TypeError` when the format is not a string, when there are too few
  arguments for a conversion or a `*`, or when `%s` gets something other
  than a string or `None`.
- `ValueError` when `%c` gets a string that is not exactly one character,
  or `%p` gets a negative integer.

### Lower-level pieces

- `ftprintf.flags`: `Flags`, `parse_flags`, `parse_width`, `parse_precision`.
- `ftprintf.numbers`: `itoa`, `utoa`, `htoa`, `numlen`, `unumlen`.
- `ftprintf.padding`: `padding`, `apply_width`, `apply_precision_str`,
  `apply_precision_num`, `add_prefix`.
- `ftprintf.conversions`: `render_char`, `render_string`, `render_pointer`,
  `render_decimal`, `render_unsigned`, `render_hex`, `render_percent`,
  `render_conversion`.

### What it does not do

There are no floating-point conversions (`f`, `e`, `g`), no length
modifiers (`l`, `h`, `ll`) and no positional arguments. The package is a
library only and installs no command.

## Running the tests

```
pip install .[test]
pytest
```