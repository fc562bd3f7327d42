# tonegraph

tonegraph builds sounds out of small components wired together into a graph,
and renders the result as mono 32-bit signed little-endian PCM samples.

Each component produces a value for a point in time. Its inputs
(`ComponentInput`) either hold a fixed default value or are fed by the output
of another component, so a handful of simple parts combine into envelopes,
echoes, loops and mixes.

## Components

`tonegraph.factory.create_component(name)` builds a component from its name
and raises `ValueError` for an unknown one; `component_names()` lists every
accepted name.

Generators in `tonegraph.generators` (inputs: Frequency 400, Amplitude 1,
Offset 0):

- `Sinusoidal` (`SinusComponent`)
- `Square` (`SquareComponent`)
- `Triangle` (`TriangleComponent`)
- `Saw Tooth` (`SawToothComponent`)

Generators keep a running phase; call `init()` on a component (or on the
component it feeds) to reset it before sampling from time 0.

Other sources:

- `Random` (`RandomComponent`): white noise (inputs: Amplitude 1, Offset 0)

Operators in `tonegraph.operators`:

- `Add`, `Multiply`: combine Signal A and Signal B
- `Delay`: shift a signal later in time; 0 before the delay has elapsed
- `Repeat`: loop the first Duration seconds of a signal
- `ADSR`: shape a signal with attack, decay, sustain and release stages
- `Output`: the final sink of a graph; it has no output pin of its own
  (`has_output` is false) and is not `removable`

## Wiring components

```python
from tonegraph.factory import create_component

tone = create_component("Sinusoidal")
env = create_component("ADSR")

signal_in = env.get_input("Signal")
if signal_in.can_set_component(tone):   # refuses links that would form a cycle
    signal_in.component = tone

env.init()
print(env.output(0.05))
```

`Component.get_input` accepts a position or a name and returns `None` when no
such input exists. `Component.depends_on(other)` tells whether `other` feeds a
component directly or indirectly. New component kinds derive from
`tonegraph.component.Component` (or `GeneratorComponent`) and implement
`output(time)`, declaring their inputs with `add_input`.

## Rendering samples

```python
from tonegraph.factory import create_component
from tonegraph.signal import Signal

tone = create_component("Sinusoidal")
signal = Signal(component=tone, duration=1.0, sample_rate=48000)
signal.connect(lambda: print("generated", signal.sample_count, "samples"))
signal.generate()
print(signal.sample(12))
```

Each value is clamped to [-1, 1] before being scaled to the 32-bit range.
`Signal.samples` holds the raw bytes, `sample(index)` returns one sample (0
outside the data), and callbacks registered with `connect` run after each
`generate()`.

`Signal.buffer` is a `tonegraph.loopable_buffer.LoopableBuffer` over the
samples: `set_cursor_time(seconds)` places a cursor, `to_start()` moves the
stream to it, `to_end()` to the last byte, and `set_loop(True)` makes reads
wrap back to the start and always fill the requested size.

## Other helpers

- `tonegraph.action_cycle.ActionCycle`: a list of labels (and optional icons)
  that advances by one on each `trigger()`, passing the fired index to every
  callback registered with `connect`.
- `tonegraph.random_source.random_range(low, high)`: a random integer in
  `[low, high)`; `ValueError` for an empty range.

## What it does not do

tonegraph only computes samples. It does not play audio through a sound
device, write WAV or other audio files, save or load graphs as project
files, or provide a graphical editor; it has no command-line program.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```