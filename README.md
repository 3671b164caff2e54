# rectbox

`rectbox` turns the button presses of a rectangle-style ("box") controller into
controller outputs: left and right stick coordinates, triggers, face buttons and
the D-pad. It holds the mapping logic only. You fill in an `InputState`, a game
mode writes an `OutputState`, and you read the result back.

## Modules

- `rectbox.state`: `InputState` (buttons pressed, plus optional Nunchuk
  readings), `StickDirections` (per-axis direction, -1, 0 or 1) and
  `OutputState` (the controller report). The analog fields of `OutputState`
  are stored as unsigned bytes and wrap modulo 256 when assigned.
- `rectbox.socd`: resolution of simultaneous opposing cardinal directions.
  `SocdType` has `NEUTRAL`, `SECOND_INPUT_PRIORITY`,
  `SECOND_INPUT_PRIORITY_NO_REACTIVATION`, `DIR1_PRIORITY`, `DIR2_PRIORITY`
  and `NONE`. The functions `neutral`, `dir1_priority`,
  `second_input_priority` and `second_input_priority_no_reactivation` take two
  booleans (the latter two also a `SocdState`) and return the resolved pair.
  `SocdPair` names two `InputState` fields and a `SocdType`.
- `rectbox.fixed`: signed 8.8 fixed-point helpers on 16-bit values:
  `float_to_fixed`, `fixed_to_float`, `int_to_fixed`, `fixed_to_int`,
  `fixed_add`, `fixed_sub`, `fixed_mul`, `fixed_div`, `fast_div` and `lerp`.
  Division by zero saturates to `FIXED_MAX` or `FIXED_MIN` by the numerator's
  sign.
- `rectbox.input_source`: the abstract `InputSource` with `scan_speed()` and
  `update_inputs(inputs)`, and `InputScanSpeed` (`SLOW`, `MEDIUM`, `FAST`).
- `rectbox.input_mode`: `InputMode`, which applies a list of `SocdPair`s to an
  `InputState` in place with `handle_socd`.
- `rectbox.controller_mode`: the abstract `ControllerMode`. Its
  `update_outputs(inputs, outputs)` resolves SOCD and then calls the mode's
  `update_digital_outputs` and `update_analog_outputs`. `update_directions`
  sets `directions` and full-travel stick values.
- `rectbox.backend`: the abstract `CommunicationBackend`. It holds input
  sources, `inputs`, `outputs` and a game mode. `scan_inputs(speed=None)`
  reads all sources, or only those of one speed. `update_outputs()` resets the
  outputs and runs the game mode.
- `rectbox.input_viewer`: `encode_report(inputs)` builds the 25-byte ASCII
  report line, using `ReportState` byte values. `B0XXInputViewer` is a backend
  that writes that report to a binary stream.
- `rectbox.modes`: game modes, each a `ControllerMode`:
  - `fgc.FgcMode(horizontal_socd, vertical_socd)`
  - `melee18.Melee18Button(socd_type, options=None)` with `Melee18ButtonOptions`
  - `melee20.Melee20Button(socd_type, options=None)` with `Melee20ButtonOptions`
  - `project_m.ProjectM(socd_type, options=None)` with `ProjectMOptions`
  - `rivals.RivalsOfAether(socd_type)`
  - `ultimate2.Ultimate2(socd_type)`
  - `mkwii.MKWii(socd_type)`
  - `hollow_knight.HollowKnight(socd_type)`
  - `shovel_knight.ShovelKnight(socd_type)`
  - `salt_and_sanctuary.SaltAndSanctuary(socd_type)`

  Both Melee modes always use `socd.MELEE_SOCD` (neutral), whatever
  `socd_type` is passed.
- `rectbox.melee_zones`: stick zone classification (`sdi_zone`, `pivot_zone`,
  `uptilt_shutoff_zone`, `is_easy`), tap-SDI detection (`is_tap_sdi`), travel
  interpolation (`travel_time_calc`) and `CoordinateFuzzer`, which applies
  jitter of at most one unit to a coordinate.
- `rectbox.melee_limits`: `MeleeLimiter`, a stateful filter. Call
  `limit_outputs(sample_spacing, which_ab, inputs, raw_output)` once per
  sample. `sample_spacing` is in units of 4 µs. The call returns a new
  `OutputState` whose left stick has had these applied: travel time, tap- and
  wank-SDI lockouts, pivot-tilt handling, crouch-to-jump and shallow wavedash
  angle limits. `AbTest` selects the variant.

## Example

```python
from rectbox.modes.melee20 import Melee20Button, Melee20ButtonOptions
from rectbox.socd import SocdType
from rectbox.state import InputState, OutputState

mode = Melee20Button(SocdType.NEUTRAL, Melee20ButtonOptions())

inputs = InputState(right=True, up=True, mod_x=True)
outputs = OutputState()
mode.update_outputs(inputs, outputs)

print(outputs.left_stick_x, outputs.left_stick_y)
```

Limiting Melee outputs sample by sample:

```python
from rectbox.melee_limits import AbTest, MeleeLimiter

limiter = MeleeLimiter()
limited = limiter.limit_outputs(250, AbTest.A, inputs, outputs)
print(limited.left_stick_x, limited.left_stick_y)
```

Sending input-viewer reports to a stream:

```python
import io

from rectbox.input_viewer import B0XXInputViewer

stream = io.BytesIO()
viewer = B0XXInputViewer([], stream, write_capacity=lambda: 64)
viewer.set_game_mode(mode)
viewer.update_outputs()
sent = [viewer.send_report() for _ in range(6)]
# Only the sixth call writes a report.
print(sent, stream.getvalue())
```

`send_report` returns `False` and writes nothing when `write_capacity()`
reports fewer than 32 bytes free. Otherwise it writes on every sixth call.
Before writing, it scans only the `FAST` input sources.

## What it does not do

`rectbox` reads no hardware and speaks no controller protocol. It has no GPIO
or switch-matrix input sources, no GameCube, N64, USB HID or keyboard backends,
and no command-line program. To use it with a real device, write an
`InputSource` that fills `InputState` from your own readings. Then either
subclass `CommunicationBackend` or use `B0XXInputViewer`, and send the
resulting `OutputState` yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```