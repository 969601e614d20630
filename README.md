# minitalk

A pair of commands that pass a text message from one process to another using
only two POSIX signals. Every byte of the message is sent as eight bits, most
significant bit first. `SIGUSR1` carries a 0 and `SIGUSR2` carries a 1. Text is
sent as UTF-8. The server puts the bits back together and prints the text as
soon as each character is complete.

It runs on POSIX systems, where `SIGUSR1` and `SIGUSR2` exist.

## Installing

```
pip install .
```

## Running

Start the server in one terminal. It prints its process id and then waits for
signals until you stop it with Ctrl-C:

```
minitalk-server
```

In a second terminal, send a message to that process id:

```
minitalk-client <PID> "hello there"
```

For every bit, the client prints `SIGUSR1 HAS BEEN SENT - 0` or
`SIGUSR2 HAS BEEN SENT - 1`. It prints an empty line after each byte and
pauses 200 microseconds between signals. If it is not given exactly two
arguments, it prints `ERROR - Insufficient arguments` and exits with status 0.
If the process cannot be signalled, it reports the error on standard error and
exits with status 1.

## What it does not do

The transfer runs in one direction only. The server sends no acknowledgement
back, so the client cannot tell whether each signal was received. It relies
only on the fixed pause between signals. Signals that arrive too close together
may be merged by the operating system, and the message is then garbled.

## Using it from Python

The bit encoding is in `minitalk.protocol`. `encode_char` returns the eight bits
of one byte as a tuple. `encode_message` yields one such tuple per byte.
`BitDecoder.feed` takes one bit and returns the completed byte value after
every eighth bit. `BitDecoder.feed_signal` does the same with the signal that
carried the bit.

```python
from minitalk.protocol import BitDecoder, encode_message

decoder = BitDecoder()
received = bytearray()
for bits in encode_message("hi"):
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            received.append(byte)
assert received.decode("utf-8") == "hi"
```

`minitalk.client.send_message(pid, message, kill=None, delay=..., stream=None)`
and `minitalk.client.send_character(...)` send data to a process. They use
`os.kill` and a 200 µs pause by default. The `kill` callable, the `delay` and
the report `stream` can all be replaced. `send_message` returns the number of
bytes sent.

`minitalk.server.Server(stream=None)` decodes bit signals passed to
`Server.handle(sig, frame=None)`. It writes the decoded UTF-8 text to the
stream, standard output by default, and returns the text just completed.
`Server.install()` routes this process's `SIGUSR1` and `SIGUSR2` to `handle`.

The package also includes the helpers these commands are built on:

- `minitalk.printf`: `format_message` and `printf` for the `%c %s %p %d %i %u %x %X %%` conversions, together with `put_str`, `put_endline` and `put_number`. A bad conversion or argument raises `FormatError`.
- `minitalk.textutil`: `parse_int`, `int_to_str`, `split_fields`, `find_char`, `rfind_char`, `bounded_concat`, `bounded_copy`, `compare_prefix`, `find_bounded`, `trim` and `substring`.
- `minitalk.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and `to_upper` for ASCII characters.
- `minitalk.lines.LineReader(stream, chunk_size=42)`: reads a text or binary stream one line at a time, in chunks of a fixed size. `read_line()` returns `None` at the end of the stream, and iterating over the reader yields each line.

## Tests

```
pip install .[test]
pytest
```