# transpatch

Building blocks for multi-sided free-form surface patches. numpy does the
vector arithmetic, and all points are numpy arrays of three coordinates.

## Modules

- `transpatch.utilities`: `affine_combine`, `binomial`, `hermite` (the cubic
  Hermite blends 0..3), `bernstein` (all Bernstein polynomials of a degree),
  `bernstein_single` (one Bernstein polynomial) and `bezier_elevate` (Bezier
  degree elevation by one).
- `transpatch.nelder_mead`: `optimize`, a Nelder–Mead simplex minimiser. It
  returns an `OptimizeResult` with the best point `x`, its `value` and a
  `converged` flag.
- `transpatch.bezier`: `BCurve`, a Bezier curve with `eval`, `derivatives`,
  `reverse` (in place), `arc_length` (4-point Gauss quadrature), the
  `degree` and `control_points` properties, and the class method
  `fit_class_a`, which fits a class-A curve between two points with given end
  tangents and doubles the degree while the fit is poor. The module also has
  `rotation_matrix(axis, angle)`.
- `transpatch.blending`: the blending functions of transfinite patches,
  `blend_corner`, `blend_side_singular` and `blend_corner_deficient`. It also
  has the corner helpers `CornerData`, `corner_correction`, `gamma` and
  `rational_twist`, and the tolerance `EPSILON`.
- `transpatch.generalized_bezier`: `GeneralizedBezierNet`, the control
  network and evaluator of an n-sided generalized Bezier patch. It has
  `control_point`, `set_control_point` (which keeps the copies shared with
  the adjacent side in step), `set_individual_control_point`, `weight`, `eval`
  and `boundary_curves`, and the attributes `central_control_point` and
  `squared_weights`.
- `transpatch.gb_fit`: `elevate_degree`, which returns a
  `GeneralizedBezierNet` of one degree higher.
- `transpatch.spatch`: `SPatchNet`, an S-patch control network keyed by
  multi-indices, with `set_control_point`, `control_point`, `eval` and
  `boundary_curves`. The module also has `multinomial` and `multi_bernstein`.
- `transpatch.superd`: `SuperDPatch`, a Super-D patch built from one vertex
  point and a face and an edge point per side. It needs at least 3 sides. It
  has `generate_quartic`, `generate_base`, `generate_mid`, `generate_opp`
  (3- and 4-sided patches only), `generate_ribbon`, `update_ribbons`, `eval`
  and `boundary_curves`. The module also has `bezier_evaluate` for 5x5
  quartic nets.
- `transpatch.io`: text-file input and output. It has `load_bezier` and
  `save_bezier` for generalized Bezier networks, and
  `write_bezier_control_points`, which writes the network as an OBJ mesh. It
  also has `load_spatch`, `load_superd_model` (which returns patches whose
  ribbons are already computed) and `write_pcp`, which writes points with
  their `(u, v)` parameters.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Example

This builds a generalized Bezier network, saves it and reads it back:

```python
import numpy as np
from transpatch.generalized_bezier import GeneralizedBezierNet
from transpatch.io import save_bezier, load_bezier

net = GeneralizedBezierNet(5, 3)
net.set_control_point(0, 1, 1, np.array([0.2, 0.3, 1.0]))
save_bezier(net, "patch.gbp")
same = load_bezier("patch.gbp")
print(same.control_point(0, 1, 1))
```

`GeneralizedBezierNet.eval` and `SuperDPatch.eval` take local side
parameters, one `(s, d)` pair per side, and return a point on the surface.
`SPatchNet.eval` takes one barycentric coordinate per side.

## What the package does not do

- It has no domain polygon or parameterization. The caller must compute the
  `(s, d)` side parameters or the barycentric coordinates and pass them in.
- It does not tessellate patches into triangle meshes. It also does not fit
  patches to point clouds.
- It has no command-line program. It is a library only.

## Running the tests

```
pytest
```