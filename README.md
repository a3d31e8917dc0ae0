# camsim

camsim simulates a set of cameras. Each camera produces small binary
**status** and **discover** messages. It sends them in batches over TCP to a
collector server, and the server writes one text log per camera.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

Start the collector:

```
camsim-server [--host HOST] [--port PORT] [--output-dir DIR]
```

By default it listens on all interfaces on port 5555. It writes logs to the
current directory. Each connected client is handled on its own thread. Stop
the server with Ctrl-C.

Start the simulated cameras:

```
camsim-client [CONFIG]
```

`CONFIG` is a `key=value` settings file. It defaults to `Text.txt` in the
current directory:

```
num_of_camera=3
num_of_image_to_second=10
ip_sever=127.0.0.1
port_sever=5555
```

The file is read as follows:

- Unknown keys are ignored.
- A file that cannot be opened leaves every setting at its default of zero or
  empty.
- `num_of_camera` must be between 0 and 20.
- `num_of_image_to_second` is read but not used by the cameras.

The cameras are named `a`, `b`, `c`, and so on. Each camera opens its own
connection to the server and runs two background threads:

- The generating thread adds one to four random messages at a time to the
  camera's send buffer.
- The sending thread sends the buffer to the server. It then waits three
  seconds and empties the buffer.

Press Enter, end the input, or press Ctrl-C to stop the cameras.

For each batch, the server opens (and overwrites) `camera_<id>.txt` and writes
one line per message.

The message id is not part of the wire format, so it is logged as 0. A status
message is logged like this:

```
messageId : 0	messageType: 1	status: 2
```

## Wire format

A batch from camera `a` holding two messages looks like this:

```
&a&#<payload>##<payload>#END
```

All values are little-endian.

| Message  | Size     | Layout                                                  |
|----------|----------|---------------------------------------------------------|
| status   | 3 bytes  | type `1` (2 bytes), then status (1 byte, 1–3, else 0)   |
| discover | 14 bytes | type `2` (2 bytes), then distance, angle and speed      |

Distance, angle and speed are 32-bit floats with these ranges:

- distance: 500–10000
- angle: 0–360
- speed: 0–1000

A value outside its range is stored as 0.

## Library use

```python
from camsim.messages import StatusMessage, DiscoverMessage, decode_message
from camsim.buffer import MessageBuffer
from camsim.connection import encode_batch

payload = DiscoverMessage(7, 2, 1200.0, 90.0, 40.0).to_bytes()
message = decode_message(payload)      # 14 bytes -> DiscoverMessage
print(message.describe(), end="")      # type: 2	distance: 1200	angle: 90	speed:40

buffer = MessageBuffer()
buffer.add(StatusMessage(1, 1, 2).to_bytes())
print(encode_batch(buffer.items(), "a"))   # b'&a&#\x01\x00\x02#END'
```

The modules are:

- `camsim.messages`
  - `Message`, `StatusMessage` and `DiscoverMessage`, each with `to_bytes`,
    `from_bytes`, `describe` and `to_record`.
  - `decode_message`.
- `camsim.buffer.MessageBuffer`: a thread-safe list of encoded messages, with
  `add`, `items`, `clear` and `is_empty`.
- `camsim.config.Config`: the client settings, with `from_file` and `insert`.
- `camsim.connection`
  - `encode_batch`.
  - `ServerConnection`, with `connect`, `send_buffer` and `close`. It is usable
    as a context manager.
- `camsim.camera.Camera`: one simulated camera, with `generate`,
  `flush_to_buffer`, `run`, `stop` and `send_to_server`.
  - `create_status_message` and `create_discover_message` build random
    messages.
- `camsim.simulator.Simulator`: runs a set of cameras, with `start` and `stop`.
- `camsim.server`
  - `ClientSession`: parses one client's byte stream and writes the camera
    logs.
  - `handle_client` and `serve`.

## Limitations

- The server keeps only the plain-text logs. It has no storage or query
  interface.
- Each new batch from a camera overwrites that camera's log file.
- A malformed stream ends the client's session.