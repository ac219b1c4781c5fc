"""sdfcat.catalog: the named shapes served by the registry.

:data:`CATALOG` is the closed, ordered list of entries.  Its order is the
order reported by :func:`sdfcat.list_available`.  Adding a shape means
writing a ``(p, time, seed) -> distances`` function in one of the modules
below and appending a :class:`~sdfcat._types.ShapeEntry` here with its
Lipschitz bound (``None`` when the bound is not established).

Modules
-------
:mod:`.basic`       single primitives
:mod:`.composite`   hard and smooth boolean assemblies
:mod:`.deformed`    repetition, mirroring, elongation, twist, bend
:mod:`.animated`    time-dependent shapes
:mod:`.procedural`  seed-driven shapes
:mod:`.fractal`     fractals and implicit surfaces
"""

from __future__ import annotations

from .._types import ShapeEntry
from . import animated, basic, composite, deformed, fractal, procedural

CATALOG = (
    # --- primitives ---
    ShapeEntry("Sphere", basic.sphere, 1.0, "sphere of radius 0.5"),
    ShapeEntry("Cube", basic.cube, 1.0, "axis-aligned cube, half size 0.5"),
    ShapeEntry("RoundedCube", basic.rounded_cube, 1.0, "cube with rounded edges"),
    ShapeEntry("BoxFrame", basic.box_frame, 1.0, "edges of a cube"),
    ShapeEntry("Torus", basic.torus, 1.0, "torus in the XZ plane, radii 0.5 / 0.2"),
    ShapeEntry("CappedTorus", basic.capped_torus, 1.0, "open torus arc"),
    ShapeEntry("Link", basic.link, 1.0, "single chain link"),
    ShapeEntry("Cylinder", basic.cylinder, 1.0, "capped cylinder along Y"),
    ShapeEntry("Capsule", basic.capsule, 1.0, "capsule along X"),
    ShapeEntry("Cone", basic.cone, 1.0, "truncated cone along Y"),
    ShapeEntry("RoundCone", basic.round_cone, 1.0, "two spheres joined by a cone"),
    ShapeEntry("Octahedron", basic.octahedron, 1.0, "regular octahedron"),
    ShapeEntry("HexPrism", basic.hex_prism, 1.0, "hexagonal prism along Z"),
    ShapeEntry("TriPrism", basic.tri_prism, 1.0, "triangular prism along Z"),
    ShapeEntry("Pyramid", basic.pyramid, 1.0, "square pyramid"),
    ShapeEntry("Ellipsoid", basic.ellipsoid, None, "ellipsoid (approximate estimate)"),
    ShapeEntry("CutSphere", basic.cut_sphere, 1.0, "sphere cut flat at y = -0.2"),
    ShapeEntry("DeathStar", basic.death_star, 1.0, "sphere with a spherical bite"),
    ShapeEntry("GroundPlane", basic.ground_plane, 1.0, "half-space below y = -0.5"),
    # --- composites ---
    ShapeEntry("CSGBlock", composite.csg_block, 1.0, "drilled box-sphere intersection"),
    ShapeEntry("Snowman", composite.snowman, 1.0, "three blended spheres"),
    ShapeEntry("Dumbbell", composite.dumbbell, 1.0, "bar with spherical weights"),
    ShapeEntry("HollowSphere", composite.hollow_sphere, 1.0, "cut-open spherical shell"),
    ShapeEntry("Gear", composite.gear, 1.0, "twelve-tooth spur gear"),
    ShapeEntry("Chain", composite.chain, 1.0, "three interlocked links"),
    ShapeEntry("CubeSphereXor", composite.cube_sphere_xor, 1.0, "cube xor sphere"),
    # --- domain operators ---
    ShapeEntry("TwistedBox", deformed.twisted_box, 1.0, "box twisted about Y"),
    ShapeEntry("BentBox", deformed.bent_box, 1.0, "slab bent about Z"),
    ShapeEntry("ElongatedSphere", deformed.elongated_sphere, 1.0, "stretched sphere"),
    ShapeEntry("ElongatedTorus", deformed.elongated_torus, 1.0, "stretched torus"),
    ShapeEntry("SphereLattice", deformed.sphere_lattice, 1.0, "infinite sphere lattice"),
    ShapeEntry("CubeGrid", deformed.cube_grid, 1.0, "3x3x3 grid of cubes"),
    ShapeEntry("MirroredCapsules", deformed.mirrored_capsules, 1.0, "four mirrored pillars"),
    # --- animated ---
    ShapeEntry("PulsingSphere", animated.pulsing_sphere, 1.0, "sphere with oscillating radius"),
    ShapeEntry("OrbitingSpheres", animated.orbiting_spheres, 1.0, "spheres orbiting a core"),
    ShapeEntry("Morph", animated.morph, 1.0, "sphere-to-cube morph"),
    ShapeEntry("SpinningTorus", animated.spinning_torus, 1.0, "tumbling torus"),
    ShapeEntry("Fish", animated.fish, None, "fish, wagging tail (approximate estimate)"),
    # --- procedural ---
    ShapeEntry("RandomSpheres", procedural.random_spheres, 1.0, "seeded sphere cloud"),
    ShapeEntry("Asteroid", procedural.asteroid, 1.0, "seeded rough sphere"),
    ShapeEntry("DriftingBlobs", procedural.drifting_blobs, 1.0, "seeded blended blobs"),
    ShapeEntry("CrystalCluster", procedural.crystal_cluster, 1.0, "seeded octahedral crystals"),
    # --- fractals ---
    ShapeEntry("Mandelbulb", fractal.mandelbulb, None, "power-8 Mandelbulb estimate"),
    ShapeEntry("MengerSponge", fractal.menger_sponge, 1.0, "level-4 Menger sponge"),
    ShapeEntry("SierpinskiTetrahedron", fractal.sierpinski_tetrahedron, 1.0,
               "folded Sierpinski tetrahedron"),
    ShapeEntry("GyroidBall", fractal.gyroid_ball, 1.0, "gyroid sheet clipped to a sphere"),
)

__all__ = ["CATALOG"]
