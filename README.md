# tinytarget

`tinytarget` is a software model of a small training target for side-channel
and fault-injection work. It speaks the line-based SimpleSerial protocol and
offers the same operations the target does:

- **SimpleSerial** framing. `k<hex>\n` loads a key, `p<hex>\n` submits a
  plaintext, and every result comes back as `r<HEX>\n`. A line may also end
  in `\r`.
- **AES-128**, **TEA** and **XOR** block encryption.
- A **password check** whose comparison stops at the first wrong character.
- A **glitch loop** that counts through two nested loops of 200 steps each and
  reports the counters, so a disturbed run stands out.
- A **print** mode that writes `Testing <n>` lines.

The board's trigger line and LEDs are modelled by `tinytarget.board.Board`, so
you can see when the trigger was raised around the operation of interest.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Using the library

### Ciphers

Each cipher takes the block and the key as bytes and returns new bytes. A
block or key of the wrong length raises `ValueError`.

```python
from tinytarget.tea import tea_encrypt
from tinytarget.aes import aes_encrypt
from tinytarget.xor import xor_encrypt

key = bytes(range(16))

ciphertext = tea_encrypt(bytes.fromhex("0102030405060708"), key)
print(ciphertext.hex().upper())          # B1A1AB198C45FA5B

aes_block = aes_encrypt(bytes(16), key)  # one 16-byte block, AES-128
xor_block = xor_encrypt(bytes(16), key)  # 16-byte block XORed with the key
```

| Function                      | Block | Key |
|-------------------------------|-------|-----|
| `tinytarget.aes.aes_encrypt`  | 16    | 16  |
| `tinytarget.tea.tea_encrypt`  | 8     | 16  |
| `tinytarget.xor.xor_encrypt`  | 16    | 16  |

`tinytarget.aes.xtime` multiplies a byte by 2 in GF(2^8). Only the encryption
direction is provided for AES and TEA; XOR is its own inverse.

### SimpleSerial framing

`tinytarget.simpleserial` provides:

- `encode(data)`: turns bytes into a reply line, `r` + upper-case hex + `\n`.
- `decode(text)`: turns a string of hex digit pairs (either case) into bytes;
  anything else raises `ValueError`.
- `SimpleSerial(reader, writer, uppercase_only=False)`: `reader` returns one
  character (`str` or `bytes`) per call, and an empty value means the input is
  exhausted, which raises `EOFError`. `writer` receives the text to send.
  - `get(size_input, size_key)` reads one `p` or `k` frame and returns a
    `Frame` (with `command`, `data`, `is_plaintext` and `is_key`), or `None`
    as soon as the line turns out to be malformed.
  - `get_address(size=2)` reads one `a` frame and returns its payload, or
    `None`.
  - `put(data)` sends a reply line.

  Payloads are limited to 16 bytes. With `uppercase_only=True` only upper-case
  hex digits are accepted in the message body.

```python
import io
from tinytarget.simpleserial import SimpleSerial

incoming = io.StringIO("p0102030405060708\n")
serial = SimpleSerial(lambda: incoming.read(1), print)
frame = serial.get(8, 16)
print(frame.is_plaintext, frame.data.hex())   # True 0102030405060708
```

### Board

`Board` holds `trigger`, `led1` (green), `led2` (red) and `trigger_count`.
`Board.triggered()` is a context manager that raises the trigger for the
duration of a block. `mode_from_port3(value)` extracts the three mode bits
(bits 3 to 5) from an 8-bit port value.

### Programs

- `tinytarget.passcheck.check_password(reader, writer, board, stored=...)`
  prints a welcome and prompt, reads a password up to `\r`, compares it under
  the trigger with `password_matches`, reports the result and lights `led1` on
  success or `led2` on failure. It returns whether the password was accepted.
  The default stored password is `"password"`.
- `tinytarget.glitchloop.glitch_loop(writer, board, iterations=None)` repeats
  `count_loop()` under the trigger and writes `"<n>: <i> <j> <count>"` lines;
  it runs forever when `iterations` is `None`.
- `tinytarget.app.print_loop(writer, limit=None)` writes `Testing <n>` lines.
- `tinytarget.app.serve_cipher(serial, board, cipher, block_size, key_size,
  limit=None)` answers plaintext frames with their encryption under the
  latest key (all zero bytes until a key frame arrives), ignores malformed
  frames, stops after `limit` frames or at end of input, and returns how many
  blocks it encrypted.
- `tinytarget.app.run(mode, reader, writer, board=None, limit=None)` writes a
  single newline and then starts the program for `mode`. `Mode` numbers them:
  `PRINT` 0, `PASSCHECK` 1, `GLITCHLOOP` 2, `XOR` 3, `AES` 4, `TEA` 5. Any
  other number does nothing further.

## Command line

```
tinytarget --help
```

runs a program over standard input and output:

```
tinytarget [mode] [--port3 VALUE] [--limit N]
```

- `mode` is a program name (`print`, `passcheck`, `glitchloop`, `xor`, `aes`,
  `tea`) or a number; it defaults to `print`.
- `--port3` selects the mode from an 8-bit port 3 value instead.
- `--limit` stops after that many iterations or frames.

For example, to encrypt one TEA block:

```
printf 'k000102030405060708090A0B0C0D0E0F\rp0102030405060708\r' | tinytarget tea --limit 2
```

If the input ends while a program still needs characters, the command prints
a message to standard error and exits with status 1.

## What it does not do

`tinytarget` runs entirely in software. It does not open a serial port or
drive any pins: input and output are whatever reader and writer you pass in,
or standard input and output for the command. It has no tool for reading
memory out of a chip; `get_address` only parses address frames.