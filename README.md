# etisnoop

Python building blocks for inspecting DAB (Digital Audio Broadcasting) ETI
streams and their Fast Information Channel (FIC). Pure Python, no
dependencies outside the standard library.

## Modules

- `etisnoop.crc` – byte-at-a-time CRC updates: `update_crc_16`,
  `update_crc_32`, `update_crc_ccitt`, `update_crc_dnp`, `update_crc_kermit`
  and `update_crc_sick(crc, c, prev_byte)`. Each takes the running CRC and the
  next byte (only its low eight bits are used) and returns the new CRC.
- `etisnoop.firecode` – `firecode_crc(data)`, the 16-bit Fire code CRC
  (polynomial 0x782F, initial value 0) protecting DAB+ superframe headers.
- `etisnoop.utils` – YAML-style output helpers and small decoders:
  - `DisplaySettings(print, indent)`; adding an integer returns settings with
    a larger indent.
  - `set_verbosity` / `get_verbosity` for the global verbosity level.
  - `format_yaml(header, disp, buffer, desc, value)` returns one YAML entry;
    the `data:` list of a buffer is included only when verbosity is above 0.
  - `printbuf`, `printfig`, `printvalue`, `printinfo`, `printsequencestart`
    print to standard output. `printbuf` given an integer indent prints only
    when verbosity is above 1; `printvalue` given an integer indent always
    prints; `printinfo` prints when verbosity is at least `min_verb`.
  - `mjd_to_str(mjd)` turns a Modified Julian Date into a string such as
    `Wed Jan 01 2020`, or an `invalid MJD ...` message.
  - `pnum_to_str(programme_number)` describes a Programme Number, including
    the status, blank and interrupt codes.
  - `absolute_to_db(value)` converts a 16-bit level to dBFS (0 gives -90,
    negative values raise `ValueError`).
  - `read_u16(buf, offset=0)` and `read_u32(buf, offset=0)` read big-endian
    integers and raise `ValueError` when the buffer is too short.
- `etisnoop.watermark` – `WatermarkDecoder` collects bits from the FIG 0/1
  sub-channel order (`push_fig0_1_bit`) and the FIG 0/10 ConfInd flag
  (`push_confind_bit`); `calculate_watermark()` returns the decoded text,
  preferring the FIG 0/1 encoding, with ` (old watermark)` appended for the
  ConfInd one, or `(NOT FOUND)`. `decode_watermark_bits(bits)` decodes one
  bit sequence and reports the sync position on standard error.
- `etisnoop.tables` – `get_language_name`, `get_announcement_type`,
  `get_programme_type(int_table_id, pty)`, `get_dscty_type` and
  `get_ca_mode`. Out-of-range codes raise `ValueError`, except in
  `get_programme_type`, which returns `"unknown international table Id"` or
  `"invalid programme type"`.
- `etisnoop.repetitionrate` – `RepetitionRateAnalyser` records in which
  frames and FIBs each FIG type/extension appears (`new_fib`,
  `announce_fig`) and reports average repetition intervals, average lengths,
  a length histogram and the FIBs used (`format_analysis`,
  `display_analysis`). Lines start with `CAROUSEL ` so they are easy to grep.
- `etisnoop.wavfile` – `WavWriter(filename, rate)`, a context manager
  writing interleaved 16-bit stereo PCM; the header lengths are filled in on
  `close()`.
- `etisnoop.figalyser` – `FigAnalyser` collects `FigEntry` records per FIB
  (`set_fib`, `add`) and draws a one-line occupancy view of the FIC
  (`format_analysis(mid)`, `analyse(mid)`; mode 3 shows four FIBs, other
  modes three).
- `etisnoop.figheaders` – `Fig0Header`, `Fig1Header` and `Fig2Header` expose
  the flag and extension fields of a FIG data field (`Fig2Header` also gives
  `identifier_len()`); `FigResult` and `MessageInfo` hold decoding results;
  `set_mode_identity` / `get_mode_identity` and `set_international_table` /
  `get_international_table` keep the signalled transmission mode and
  international table.

## Installation

```
pip install .
```

## Examples

```python
from etisnoop.firecode import firecode_crc
from etisnoop.utils import pnum_to_str, mjd_to_str
from etisnoop.tables import get_programme_type

print(hex(firecode_crc(b"\x00" * 9)))
print(pnum_to_str(0))
print(mjd_to_str(58849))
print(get_programme_type(1, 1))
```

Measuring FIG repetition rates:

```python
from etisnoop.repetitionrate import RepetitionRateAnalyser

rates = RepetitionRateAnalyser()
for frame in range(10):
    rates.new_fib(0)
    rates.announce_fig(0, 0, True, 5)
rates.display_analysis(per_second=True)
```

Writing audio samples:

```python
from etisnoop.wavfile import WavWriter

with WavWriter("out.wav", 48000) as wav:
    wav.write([0, 0, 100, -100])
```

## What the package does not do

There is no command-line tool and no reader for ETI files. The package does
not decode the contents of individual FIGs (FIG 0 extensions, FIG 1 and
FIG 2 labels) beyond their header fields, keeps no ensemble database, and
does not decode DAB+ audio superframes (no Reed-Solomon correction, no AAC
decoding). These pieces are meant to be combined by a caller that does.

## Running the tests

```
pip install .[test]
pytest
```