# polyvol

Convex polytopes, random walks inside them, and volume estimation by
annealing a sequence of spherical Gaussians, built on NumPy.

## Installation

```
pip install polyvol
```

To run the test suite, install the test extra and run pytest:

```
pip install "polyvol[test]"
pytest
```

## Modules

- `polyvol.point` – `Point`, an immutable vector with `+`, `-`, scalar `*`
  and `/`, negation, `dot`, `squared_length`, indexing and iteration.
  `Point.zeros(dim)` gives the origin. Equality compares coordinates with a
  relative tolerance of `1e-11`.
- `polyvol.rng` – `RandomNumberGenerator(dim, seed=None)`, a Mersenne-twister
  source with `sample_urdist` (uniform in `[0, 1)`), `sample_uidist` (integer
  in `0 .. dim - 1`), `sample_ndist` (standard normal) and `set_seed`.
  Without a seed it is seeded from the clock.
- `polyvol.hpolytope` – `HPolytope(A, b)` for `{x | A x <= b}`, also built
  from ine-style rows with `HPolytope.from_ine`. It offers `is_in`,
  `line_intersect`, `line_positive_intersect` (exit parameter and facet
  index), `line_intersect_coord`, `compute_reflection`, `shift`,
  `linear_transform`, `normalize` and `get_dists`; `str()` prints the
  inequalities. `extract_mat_poly` returns the matrix `[b | A]`.
- `polyvol.intersection` – `BodyIntersectHPolytope(body, hpoly)`, the
  intersection of any body offering the same queries with an `HPolytope`.
  A hit on the body's boundary is reported as facet
  `num_of_hyperplanes() + 1`.
- `polyvol.known_generators` – `gen_cube`, `gen_cross`, `gen_simplex`,
  `gen_prod_simplex` and `gen_skinny_cube`. H-representations are returned as
  `HPolytope`, V-representations (cube, cross-polytope, simplex) as an array
  whose rows are the vertices. The product of simplices and the skinny cube
  exist only in H-representation; asking for vertices raises `ValueError`.
- `polyvol.random_generators` – `random_hpoly`, `random_hpoly_ball`,
  `random_vpoly`, `gen_zonotope_gaussian`, `gen_zonotope_uniform` and
  `gen_zonotope_exponential`. Random V-polytopes and zonotopes are returned as
  arrays of vertices and generating segments. Results are reproducible when a
  seed is given.
- `polyvol.sdpa` – linear matrix inequalities in SDPA format: `load_sdpa`
  and `write_sdpa` on open text streams, `read_sdpa_format_file` and
  `write_sdpa_format_file` on paths. Matrices are handled as
  `[A0, A1, ..., An]` with the inequality `A0 + A1 x1 + ... + An xn <= 0`.
  Malformed or truncated input raises `SdpaFormatError`.
- `polyvol.gaussian` – `eval_exp`, `get_max`, `get_max_coord` and
  `chord_random_point_generator_exp` for the density `exp(-a ||x||^2)`.
- `polyvol.walks` – `GaussianBallWalk`, `GaussianRDHRWalk` and
  `BilliardWalk`, plus the trajectory lengths `hpolytope_diameter`,
  `vertex_diameter` and `zonotope_diameter`.
- `polyvol.annealing` – `volume_cooling_gaussians` and its building blocks
  (`GaussianAnnealingParameters`, `get_mean_variance`, `get_first_gaussian`,
  `get_next_gaussian`, `compute_annealing_schedule`). The walk defaults to
  `GaussianBallWalk`; another can be passed as
  `walk_factory(radius, dim, a)`.
- `polyvol.settings` – `resolve_settings` fills in the algorithm
  (`Algorithm.CB`, `SOB`, `CG`), random walk (`WalkKind`), walk length,
  error, window length and seed for a `Representation` and dimension, and
  returns a `VolumeSettings`. `use_hpoly` decides whether H-polytopes are used
  when cooling a zonotope. Unknown names and a non-positive error raise
  `ValueError`.
- `polyvol.zonotope` – `zonotope_pca_approximation` encloses the zonotope
  spanned by the rows of a generator matrix in a box aligned with its
  principal axes, returned as an `HPolytope`.

## Examples

```python
from polyvol.hpolytope import extract_mat_poly
from polyvol.known_generators import gen_cube
from polyvol.point import Point

cube = gen_cube(3, False)
print(cube.is_in(Point([0.5, 0.5, 0.5])))   # True
print(extract_mat_poly(cube))
```

Estimating the volume of the cube `[-1, 1]^3`, whose inscribed ball is the
unit ball at the origin:

```python
from polyvol.annealing import volume_cooling_gaussians
from polyvol.known_generators import gen_cube
from polyvol.point import Point
from polyvol.rng import RandomNumberGenerator

cube = gen_cube(3, False)
rng = RandomNumberGenerator(3, seed=5)
print(volume_cooling_gaussians(cube, (Point.zeros(3), 1.0), rng, error=0.1))
```

Writing a spectrahedron to an SDPA file and reading it back:

```python
import numpy as np
from polyvol.sdpa import read_sdpa_format_file, write_sdpa_format_file

A0 = np.array([[-1.0, 0, 0], [0, -2, 1], [0, 1, -2]])
A1 = np.array([[-1.0, 0, 0], [0, 0, 1], [0, 1, 0]])
A2 = np.array([[0.0, 0, -1], [0, 0, 0], [-1, 0, 0]])
write_sdpa_format_file([A0, A1, A2], [1.0, 1.0], "output.txt")
matrices, objective = read_sdpa_format_file("output.txt")
```

## What it does not do

- The only volume algorithm is Gaussian cooling for bodies with facets, such
  as `HPolytope`. `resolve_settings` can name the cooling-bodies and
  sequence-of-balls algorithms and the coordinate-direction and ball walks,
  but the package has no implementation of them to run.
- There are no classes for V-polytopes or zonotopes as bodies: the
  generators return plain arrays of vertices or segments, which can be used
  for diameters and the PCA box but not for membership or ray queries.
- The inscribed ball is not computed; `volume_cooling_gaussians` takes it as
  an argument. There is no rounding of polytopes.
- There is no command-line program.