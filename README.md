# multidigest

Message digests and checksums written in plain Python, with no compiled
extensions and no third-party dependencies, plus two helpers for tools that
process disc images sector by sector: progress reporting and command-line
option parsing.

| Module                  | What it provides                                                        |
|-------------------------|-------------------------------------------------------------------------|
| `multidigest.crc32`     | The CRC-32 used by zip: `crc32`, `crc_update`, `INITIAL`                |
| `multidigest.md4`       | MD4 (`MD4`, `md4`, `md4_file`) and HMAC-MD4 (`HMACMD4`, `hmac_md4`)     |
| `multidigest.md5`       | MD5 (`MD5`, `md5`)                                                      |
| `multidigest.edonkey`   | The eDonkey/ed2k hash (`ED2KHash`, `ed2k`)                              |
| `multidigest.sha1`      | SHA-1 (`SHA1`, `sha1`)                                                  |
| `multidigest.sha256`    | SHA-256 (`SHA256`, `sha256`)                                            |
| `multidigest.progress`  | Progress lines for long jobs (`progress`, `progress_for_guis`, `ProgressStats`) |
| `multidigest.options`   | Option parsing for a disc-dumping front end (`parse_options`, `Options`, `UsageError`, `help_text`, `welcome_text`) |

## Incremental hashing

The hash classes `MD4`, `MD5`, `SHA1` and `SHA256` follow the `hashlib`
pattern: pass initial data to the constructor or feed it with `update()`,
then read the result with `digest()` or `hexdigest()`. `copy()` clones the
running state, so you can take the digest of a prefix and keep going. Taking
a digest does not end the hash; more data may still be added.

```python
from multidigest.md4 import MD4
from multidigest.md5 import MD5
from multidigest.sha1 import SHA1
from multidigest.sha256 import SHA256

h = MD5()
h.update(b"ab")
h.update(b"c")
print(h.hexdigest())   # 900150983cd24fb0d6963f7d28e17f72

print(MD4(b"abc").hexdigest())     # a448017aaf21d8525fc10ae87aa6729d
print(SHA1(b"abc").hexdigest())    # a9993e364706816aba3e25717850c26c9cd0d89d
print(SHA256(b"abc").hexdigest())  # ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad
```

Each module also has a one-shot function returning the raw digest bytes:
`md4(data)`, `md5(data)`, `sha1(data)`, `sha256(data)`. `md4_file(path)`
hashes a file's contents and lets any `OSError` from opening or reading it
propagate.

## HMAC-MD4

```python
from multidigest.md4 import HMACMD4, hmac_md4

mac = HMACMD4(b"secret")
mac.update(b"message")
assert mac.digest() == hmac_md4(b"secret", b"message")
```

Keys longer than 64 bytes are truncated to their first 64 bytes rather than
hashed first.

## CRC-32

```python
from multidigest.crc32 import INITIAL, crc32, crc_update

print(hex(crc32(b"123456789")))   # 0xcbf43926

crc = INITIAL
for piece in (b"1234", b"56789"):
    crc = crc_update(crc, piece)
print(hex(crc ^ 0xFFFFFFFF))      # 0xcbf43926
```

`crc_update` applies no inversion of its own; start from `INITIAL` and invert
the final value. A starting value outside the unsigned 32-bit range raises
`ValueError`.

## eDonkey hashes

`ED2KHash` splits its input into chunks of 9,728,000 bytes (the
`chunk_size` keyword changes this), takes the MD4 of each chunk and then the
MD4 of those chunk digests, including the digest of the trailing, possibly
empty, chunk. Input shorter than one chunk gets its plain MD4. The `chunks`
property counts the complete chunks seen so far.

```python
from multidigest.edonkey import ED2KHash

e = ED2KHash()
with open("image.iso", "rb") as f:
    for block in iter(lambda: f.read(1 << 16), b""):
        e.update(block)
print(e.hexdigest())
```

## Progress reporting

`progress(start, sectors_done, total_sectors, stats, stream=None)` and
`progress_for_guis(...)` are called once with `start=True` to record the
starting point, then repeatedly as sectors (2064 bytes each) are processed.
Both write to `stream`, or to standard output when it is `None`.

- `progress` redraws one line: a percentage, a 33-character bar, the rate in
  MB/h and an estimated finish time, ending the line once
  `sectors_done == total_sectors`.
- `progress_for_guis` writes one pipe-separated record per call, for example
  `50%|500/1000 sectors|0.98/2 MB|10/10 seconds|354.38 MB/h|01/01/2024 12:00:20`.

Timing lives in a `ProgressStats`; its `clock` field (default `time.time`)
can be replaced, and `duration()` gives the seconds between the first and the
last call, never negative. A non-positive `total_sectors` raises
`ValueError`.

## Command-line options

`parse_options(argv)` reads the options of a disc-dumping front end
(`-d/--device`, `-u/--unscramble`, `-r/--raw`, `-i/--iso`, `-a/--autodump`,
`-0` … `-9` methods, `-c/--command`, `-T/--type`, and the rest listed by
`help_text()`) into an `Options` dataclass, where `None` means "not given".
Long options may be abbreviated when unambiguous. Extra non-option arguments
are kept in `Options.extra_args` and a warning is written to standard error.

Problems raise `UsageError`, which carries `message`, `exit_status` (1 for
help and usage problems, 7 for an unknown or malformed option) and
`show_help`. An empty command line or `-h` raises it with the help text.

```python
from multidigest.options import UsageError, parse_options

try:
    opts = parse_options(["-d", "/dev/sr0", "-i", "game.iso", "--method4=27,27"])
except UsageError as err:
    print(err.message)
else:
    print(opts.device, opts.iso_out, opts.dump_method, opts.sec_disc, opts.sec_mem)
```

`welcome_text()` returns the start-up banner.

## What this package does not do

- It has no command to run: nothing here opens a drive, reads or unscrambles
  disc sectors, or writes image files. `multidigest.options` and
  `multidigest.progress` only parse arguments and print progress for a
  program that does.
- There is no single object that computes several digests in one pass; to
  get more than one, feed the same chunks to each hasher's `update()`.
- The code favours clarity over speed; for large volumes of data the
  standard `hashlib` and `zlib` modules are far faster where they offer the
  same algorithm.