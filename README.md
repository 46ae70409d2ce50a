# stomplite

Building blocks for the STOMP messaging protocol (1.0, 1.1 and 1.2):
frames, headers, header value encoding, a frame reader and writer for
binary streams, heart-beat parsing, and the small helpers a client needs
around them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Headers

`stomplite.frame.header.Header` is an ordered list of key/value entries.
Keys may repeat; the first entry for a key wins when you look it up.

```python
from stomplite.frame.header import Header

h = Header("login", "scott", "host", "stompserver")
h.add("comment", "first")
h.add("comment", "second")
h.get("comment")        # "first"
h.get_all("comment")    # ["first", "second"]
h.contains("missing")   # None; get("missing") returns ""
"host" in h             # True
h.set("host", "other")  # replaces the first "host" entry
h.delete("comment")     # removes every "comment" entry
len(h)                  # 2
list(h)                 # [("login", "scott"), ("host", "other")]
h.get_at(0)             # ("login", "scott")
```

An odd number of constructor arguments gets an empty value for the last
key. `add_header()` appends all entries of another header, and `clone()`
returns an independent copy.

`content_length()` returns the `content-length` value as an `int`, `None`
when the entry is absent, and raises `ValueError` when the value is not an
unsigned 32-bit integer.

The module also defines the standard header names as constants
(`CONTENT_LENGTH`, `DESTINATION`, `RECEIPT`, `HEART_BEAT`, ...). Command
names (`CONNECT`, `SEND`, `MESSAGE`, `ERROR`, ...) and the values of the
`ack` header live in `stomplite.frame.constants`.

## Frames

```python
from stomplite.frame.frame import Frame, new_frame

f = new_frame("CONNECT", "login", "scott", "accept-version", "1.1,1.2")
f.body = b""
copy = f.clone()   # own header and body
```

`new_frame()` raises `ValueError` when the header arguments do not come in
pairs.

## Header value encoding

```python
from stomplite.frame.codec import encode_value, unencode_value

encode_value("a:b\n")       # "a\\cb\\n"
unencode_value(b"a\\cb\\n")  # "a:b\n"
```

Unknown escape sequences are left as they are when decoding.

## Reading and writing frames

`Reader` takes frames off a binary stream and `Writer` puts them on one.
A line that holds no frame (a heart-beat) reads back as `None`, and
writing `None` sends a heart-beat newline. Both accept an optional buffer
size (default 4096).

```python
import io
from stomplite.frame.reader import Reader
from stomplite.frame.writer import Writer
from stomplite.frame.frame import new_frame

out = io.BytesIO()
writer = Writer(out)
frame = new_frame("SEND", "destination", "/queue/a")
frame.body = b"hello"
writer.write(frame)

reader = Reader(io.BytesIO(out.getvalue()))
received = reader.read()
received.command   # "SEND"
received.body      # b"hello"
```

When a frame has a `content-length` entry, exactly that many body bytes
are read and must be followed by a NUL byte; otherwise the body runs to
the first NUL. Lines may end in LF or CR-LF.

An unknown command raises `InvalidCommandError`; a header line without a
name or colon, or a missing NUL terminator, raises
`InvalidFrameFormatError`; a bad `content-length` raises `ValueError`; and
reading past the end of the stream raises `EOFError`.

## Heart-beats

```python
from stomplite.frame.heartbeat import parse_heart_beat

send, recv = parse_heart_beat("20000,60000")  # timedelta(seconds=20), timedelta(minutes=1)
```

A value that is not two non-negative millisecond counts, or is too large,
raises `InvalidHeartBeatError` (a `ValueError`).

## Client helpers

- `stomplite.ack.AckMode`: `AUTO`, `CLIENT` and `CLIENT_INDIVIDUAL`;
  `str()` gives the `ack` header value and `should_ack()` is `False` only
  for `AUTO`.
- `stomplite.errors.StompError`: an exception carrying a message and,
  where there is one, the frame behind it. `missing_header(name)` builds
  the error for an absent header entry; `error_from_frame(frame)` builds
  one from an `ERROR` frame (using its `message` entry) or from any
  unexpected frame. The module also holds the standard error message
  texts as constants.
- `stomplite.ids`: `allocate_id()` returns thread-safe, increasing ids
  starting at `"1"`; `reset_ids()` starts again from one.
- `stomplite.send_options`: `receipt` sets a fresh `receipt` entry,
  `no_content_length` drops the `content-length` entry, and
  `header(key, value)` returns an option adding a custom entry. Each
  applies to a `SEND` frame and raises `StompError` for any other.
- `stomplite.message.Message`: a received message with destination,
  content type, body, header, connection, subscription and error fields.
  `should_ack()` is true when it has a subscription whose `ack_mode` is
  not `AckMode.AUTO`. `read(size)` and `read_byte()` consume the body like
  a small byte stream; `read_byte()` raises `EOFError` when it is empty.
- `stomplite.logger`: `Logger` is the protocol a logger must follow
  (`debug`, `info`, `warning`, `error` and their `...f` formatting forms);
  `StdLogger` implements it through the standard `logging` module under
  the logger name `stomplite`, prefixing messages with `DEBUG: `,
  `INFO: `, `WARN: ` or `ERROR: `. Format strings use `%`-style
  placeholders.

## What this package does not do

It does not open network connections or run a STOMP session: there is no
connect/disconnect handshake, no subscription or transaction handling, no
background reading of frames and no heart-beat timers. It supplies the
frames, stream codec and helpers from which such a client can be built.