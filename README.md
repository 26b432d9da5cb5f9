# rtmsgs

`rtmsgs` encodes and decodes robot messages in a compact little-endian wire
format meant for serial links to small controllers. Every message is a
Python dataclass that can be turned into `bytes` and read back.

## Installation

```
pip install rtmsgs
```

## Messages

Messages are grouped by module:

- `rtmsgs.std_msgs`: `String`, `UInt8`, `Float64`, `Header`, `DurationMsg`
- `rtmsgs.std_srvs`: `EmptyRequest`, `EmptyResponse`, `TriggerRequest`, `TriggerResponse`
- `rtmsgs.geometry_msgs`: `Point`, `PointStamped`
- `rtmsgs.sensor_msgs`: `ChannelFloat32`, `CompressedImage`, `Joy`, `Temperature`
- `rtmsgs.shape_msgs`: `MeshTriangle`, `SolidPrimitive`
- `rtmsgs.dynamic_reconfigure`: `IntParameter`, `ParamDescription`
- `rtmsgs.rosgraph_msgs`: `Log`
- `rtmsgs.nav_msgs`: `GetMapFeedback`
- `rtmsgs.nodelet`: `NodeletLoadRequest`, `NodeletLoadResponse`
- `rtmsgs.rosserial_msgs`: `RequestParamRequest`, `RequestParamResponse`, `TestRequest`, `TestResponse`
- `rtmsgs.actionlib`: `TestRequestGoal`
- `rtmsgs.tf2_msgs`: `LookupTransformGoal`

Each message class carries its type name in `TYPE` and its checksum in `MD5`.
Constants such as `SolidPrimitive.BOX`, `Log.WARN` or
`TestRequestGoal.TERMINATE_ABORTED` are class attributes.

## Usage

```python
from rtmsgs.std_msgs import String, Header
from rtmsgs.timing import Time

payload = String(data="hello world!").serialize()
assert String.deserialize(payload).data == "hello world!"

header = Header(seq=1, stamp=Time.from_sec(12.5), frame_id="/odom")
copy = Header.deserialize(header.serialize())
assert copy == header
```

A `rtmsgs.wire.Message` writes itself to a `rtmsgs.wire.Writer` with
`encode` and is read from a `rtmsgs.wire.Reader` with `decode`.
`serialize()` and `deserialize()` wrap those for whole byte strings;
`deserialize()` reads from the start of the buffer and ignores any bytes
left after the message.

Details of the format:

- Integers and lengths are little-endian; strings and variable arrays are
  preceded by a 32-bit count.
- Strings are UTF-8 and end at their first NUL byte, both when written and
  when read.
- Fields of `Point`, `Temperature` and `SolidPrimitive` dimensions are kept
  at single precision but sent as eight-byte doubles.
- `MeshTriangle` needs exactly three vertex indices; any other number raises
  `ValueError`.
- A value that does not fit its field raises `ValueError` when written.
- Input that ends too early raises `rtmsgs.wire.DecodeError`, a subclass of
  `ValueError`.

## Time and duration

`rtmsgs.timing` provides `Time` (unsigned seconds and nanoseconds) and
`Duration` (signed seconds and nanoseconds), both frozen dataclasses with a
`to_sec()` method.

- `Time.from_sec(t)` builds a stamp from seconds, rounding the nanoseconds
  half away from zero; `t` outside `0 <= t < 2**32` raises `ValueError`.
- `Time.to_nsec()` returns the total nanoseconds modulo `2**32`.
- Durations support `+`, `-` and multiplication by a number. After each
  operation the fields are normalised with `normalize_sec_nsec_signed`, which
  carries whole seconds so that `0 <= nsec <= 1_000_000_000`.
- `round_half_away(r)` rounds a float to the nearest whole number, halves
  away from zero.

## What it does not do

The package only encodes and decodes messages. It has no node handle, no
publishers, subscribers or service servers, and no code that opens a serial
port or frames messages for one; moving the bytes is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```