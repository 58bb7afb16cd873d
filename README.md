# cncsim

A pure-Python core model for CNC machining simulation. It describes the
pieces a simulator or planner works with: vectors and bounding boxes, rigid
transforms, cutting tools and holders, machine axes, spindles, tool changers,
kinematics, a voxel material grid, stock, target models and manufacturing
jobs. Nothing reads the wall clock or an unseeded random source, so runs can
be reproduced exactly.

The package has no third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Overview

| Module | Contents |
| --- | --- |
| `cncsim.primitives` | `Vec3`, `AABB`, `AxisConfig`, `ControllerLimits`, `MaterialProperties`, `Unit`, `Axis`, `ToolType` |
| `cncsim.units` | `ToolpathUnits` (unit names only, no conversion) |
| `cncsim.transform` | `Quaternion`, `Transform` |
| `cncsim.frames` | `CoordinateFrame` |
| `cncsim.determinism` | `DeterministicRNG`, `ReproducibilityGuard`, `hash_u64`, `hash_float`, `hash_vec3`, `hash_value`, `combine_hashes`, `hash_range` |
| `cncsim.errors` | `ErrorSeverity`, `ErrorCode`, `SimError` |
| `cncsim.timing` | `SimulationTime`, `VariableTimeStep` |
| `cncsim.tool` | `ToolCategory`, `ToolTipType`, `ToolGeometry`, `Tool` |
| `cncsim.tool_holder` | `ToolHolder` |
| `cncsim.tool_sweep` | `ToolSweep`, `slerp` |
| `cncsim.axes` | `AxisType`, `AxisDefinition`, `is_linear_axis`, `is_rotary_axis` |
| `cncsim.spindle` | `SpindleDirection`, `Spindle` |
| `cncsim.kinematics` | `MachineKinematics`, `Cartesian3Axis`, `ForwardKinematicsResult`, `InverseKinematicsResult` |
| `cncsim.mounting` | `ToolMount`, `MachineWithTool` |
| `cncsim.tool_changer` | `ToolChangerType`, `ToolChanger` |
| `cncsim.machine` | `Machine` |
| `cncsim.validation` | `validate_machine`, `validate_basic`, `validate_axes`, `validate_spindle`, `validate_tool_changer`, `validate_work_envelope`, `is_machine_valid`, `MachineValidationError` |
| `cncsim.material` | `MaterialGrid`, `VoxelGrid` |
| `cncsim.parts` | `Stock`, `StockOrigin`, `TargetModel`, `Alignment`, `ModelMetadata` |
| `cncsim.job` | `Job`, `JobStatus`, `JobMetadata` |

## Tools on a machine

```python
from cncsim.primitives import ToolType
from cncsim.tool import Tool, ToolGeometry, ToolTipType
from cncsim.tool_holder import ToolHolder
from cncsim.kinematics import Cartesian3Axis
from cncsim.mounting import MachineWithTool

geometry = ToolGeometry(6.0, 20.0, 50.0, 6.0, ToolTipType.FLAT)
cutter = Tool("T1", "6mm flat end mill", ToolType.END_MILL, geometry)

machine = MachineWithTool(Cartesian3Axis())
machine.tool_mount.attach_tool(ToolHolder(cutter, 40.0))

tip = machine.compute_tool_tip_pose([10.0, 20.0, 50.0, 0.0, 0.0, 0.0])
print(tip.position)  # Vec3(x=10.0, y=20.0, z=-40.0)
```

Axis positions are always six values ordered `[X, Y, Z, A, B, C]`;
`Cartesian3Axis` raises `ValueError` for any other count. The tool tip lies
below the spindle by the holder length plus the tool's overall length.
`compute_tool_tip_pose` returns the identity transform when the axis
positions are outside the machine limits. An invalid holder passed to
`attach_tool` is ignored.

`compute_inverse_kinematics` derives the spindle target from a tool tip pose
by subtracting the holder's total length along the tip's local +Z and then
the holder offset, and passes that pose to the kinematics.

Transforms compose right to left: `a * b` applies `b` first, then `a`.
`ToolSweep` gives the bounding box, distance and interpolated pose
(`transform_at`, using `slerp` for rotation) of a tool moving between two
transforms.

## Machines and validation

A `Machine` holds a mapping of `AxisType` to `AxisDefinition`, a `Spindle`,
a `ToolChanger` and a work envelope. Machines compare, sort and hash by
their `id`. `machine_type()` reports `"2-Axis"`, `"3-Axis"`, `"4-Axis"`,
`"5-Axis"` or `"Custom"` from the number of linear and rotary axes.

`cncsim.validation.validate_machine` raises `MachineValidationError` (a
`ValueError`) describing the first problem found; `is_machine_valid` gives
the same answer as a boolean.

## Material, stock and target

`VoxelGrid` starts full and removes every voxel whose cell centre lies in a
region passed to `remove_region`; `remaining_volume` accounts for voxels
clipped at the far faces of the bounds. `Stock.bounding_box` places the box
according to its `StockOrigin`, and `TargetModel.bounding_box_in_stock_coords`
scales the model bounds and applies its `Alignment` (a custom alignment uses
a row-major 4x4 matrix of 16 values).

## Determinism

```python
from cncsim.determinism import DeterministicRNG, hash_vec3
from cncsim.primitives import Vec3

rng = DeterministicRNG(42)
print(rng.next(), rng.next_double(0.0, 1.0))
print(hash_vec3(Vec3(1.0, 2.0, 3.0)))
```

`DeterministicRNG` is a 64-bit linear congruential generator; a seed of 0 is
treated as 1. `SimulationTime` and `VariableTimeStep` are clocks advanced
only by explicit steps. `SimError` is a structured error value whose
severity `SimError.make` derives from its `ErrorCode`.

## What this package does not do

It is a model library only. It has no command-line program and no graphical
interface or 3D view. It does not read or write G-code, generate toolpaths
or process plans, or load mesh files: `TargetModel.source_path` and
`Stock.initial_geometry_path` are stored as given, and a `Job` keeps
whatever process plan, toolpaths and G-code values are handed to it without
interpreting them. There is no collision detection and no step-by-step
machining simulator; projects are not saved to disk.