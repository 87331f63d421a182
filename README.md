# zeroforce

Tools for studying zero forcing on simple undirected graphs: graph
construction and parsing, the zero forcing closure, a wavefront search for
the zero forcing number, and integer programming models for the zero forcing
number, fractional zero forcing, forts, propagation time and throttling.
The models are solved with SciPy's mixed-integer linear programming solver
(`scipy.optimize.milp`, HiGHS), so no commercial solver is needed.

Install with `pip install .` (add `.[test]` for pytest).

## Graphs

`zeroforce.graph.Graph` holds a graph on the vertices `0 .. order-1` as
adjacency sets. Vertex indices outside that range raise `IndexError`.

```python
from zeroforce.graph import Graph

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 3)

g.size              # number of edges (a property)
g.degree(1)
g.neighbors(1)      # frozenset of adjacent vertices
g.remove_edge(2, 3)
g.is_connected()    # every vertex reachable from vertex 0
g.tree_diameter()   # diameter, assuming the graph is a tree
g.max_degree()
h = g.copy()
print(g.describe()) # order, size and sorted adjacency lists

p4 = Graph.from_graph6("Ch")
t = Graph.from_sparse6(":Fa@x^")
e = Graph.from_edge_file("graph.edg")
```

An edge file holds whitespace-separated integers: the order, the number of
edges, then that many pairs of vertex indices. Malformed graph6, sparse6 or
edge-file input raises `ValueError`. Graphs compare equal when they have the
same order and the same edges.

## Standard families and operations

`zeroforce.constructions` builds common graphs and combines them:

```python
from zeroforce.constructions import (
    path_graph, cycle_graph, complete_graph, hypercube_graph,
    kneser_graph, k_subsets, petersen, nsun_graph, sun_link_graph,
    cart_prod, corona_prod, vert_del, vert_sum, edge_sum,
)

q3 = hypercube_graph(3)
pet = petersen()
sun = nsun_graph(5)                 # C5 corona K1
chain = sun_link_graph(3)           # three 5-suns joined by vertex sums
joined = vert_sum(q3, pet, 0, 0)    # identify vertex 0 of q3 with vertex 0 of pet
bridged = edge_sum(q3, pet, 0, 0)   # disjoint union plus one connecting edge
smaller = vert_del(pet, 4)          # higher labels shift down by one
```

In `cart_prod(g, h)` the vertex `(u, v)` is numbered `u * h.order + v`.
`hypercube_graph(d)` returns at least the path on two vertices.
`k_subsets(n, k)` lists the `k`-subsets of `range(n)` as frozensets and
`kneser_graph(n, k)` joins two of them when they are disjoint.

## Zero forcing

`zeroforce.zero_forcing` applies the colour-change rule directly:

```python
from zeroforce.constructions import path_graph, petersen
from zeroforce.zero_forcing import wavefront, zf_closure

wavefront(path_graph(6))   # 1
wavefront(petersen())      # 5

closure = zf_closure(path_graph(6), {0})
closure.filled             # frozenset of all six vertices
closure.propagation_time   # 5
```

`zf_closure(g, filled)` forces in rounds from the starting set until no
vertex can force, and returns a `Closure` with the filled vertices and the
propagation time, which is `None` when not every vertex was filled.

## Forts and fractional zero forcing

A fort is a non-empty set of vertices such that no vertex outside it has
exactly one neighbour inside it. A set is zero forcing exactly when it meets
every fort. `zeroforce.forts` provides:

- `is_fort(g, vertices)`: check the fort condition.
- `fort_cover_ip(g)`: the zero forcing number and a minimum zero forcing set.
  A master model is solved repeatedly; each time a fort missed by the current
  set is found it is added as a constraint (`FortCoverResult`).
- `fzf_ip(g)`: the fractional zero forcing number and the vertex weights, by
  adding forts of weight below one until none is left (`FractionalResult`).
- `all_minimal_forts(g)`: every minimal fort, found in order of size
  (`MinimalFortsResult`).
- `ft_num_ip(g)`: a largest collection of pairwise disjoint forts
  (`FortNumberResult`).

Every solve is given a time limit of `IP_MAX_TIME` (7200 seconds).

## Propagation time and throttling

`zeroforce.propagation` holds the infection model `infection_ip(g, t, kind)`
and the time-step model `time_step_ip(g, t, kind)`. Both take a bound `t` on
the number of forcing rounds and an `Objective` (or its letter) choosing the
value sought:

- `Objective.ZERO_FORCING` (`"Z"`): the zero forcing number;
- `Objective.MIN_PROPAGATION` (`"p"`): the least propagation time of a
  minimum zero forcing set;
- `Objective.MAX_PROPAGATION` (`"P"`): the greatest such time (time-step
  model only; the infection model raises `ValueError`);
- `Objective.THROTTLING` (`"T"`): the throttling number.

They return a `ForcingResult` with the status, the value, a zero forcing set
and a mapping from each forcing arc `(u, v)` to the time of that force.

`pt_interval(g, t)` raises a lower bound on the propagation time step by
step; at each step it finds a smallest set reaching at least that time within
`t` rounds and records the time reached with that set, stopping when no such
set exists. The result is a `PTIntervalResult` whose `intervals` maps each
time found to its set.

```python
from zeroforce.constructions import hypercube_graph
from zeroforce.propagation import Objective, pt_interval, time_step_ip

q3 = hypercube_graph(3)
time_step_ip(q3, 7, Objective.ZERO_FORCING).value
pt_interval(q3, 4).intervals
```

## Generating test graphs

`zeroforce.nauty` runs the nauty generators and yields the lines they print,
without their newlines, ready for `Graph.from_graph6` or
`Graph.from_sparse6`:

- `geng(order, options="", executable="geng")`
- `genrang(n, num, p, executable="genrang")`: `num` random graphs of order
  `n` with edge probability `p/10`; `p` outside 0 to 10 raises `ValueError`.
- `gentreeg(order, options="", executable="gentreeg")`
- `strip_line(line)`: the text before the first newline.

nauty itself must be installed. A generator that cannot be started or exits
with a non-zero status raises `NautyError` while the lines are being read.

```python
from zeroforce.graph import Graph
from zeroforce.nauty import geng
from zeroforce.zero_forcing import wavefront

for line in geng(5, "-c"):
    print(line, wavefront(Graph.from_graph6(line)))
```

## Solver layer

Each model result records the solver outcome as a `zeroforce.milp.Status`
(`OPTIMAL`, `TIME_LIMIT`, `INFEASIBLE`, `UNBOUNDED`, `ERROR`).
`zeroforce.milp.LinearModel(sense, time_limit)` is the small modelling layer
the other modules build on: `add_var` returns a variable index,
`add_constraint` takes a mapping from indices to coefficients with optional
lower and upper bounds, `set_objective` replaces the objective, and `solve`
returns a `Solution` with the status, objective value and variable values.

## What this package does not do

The package is a library only. It installs no command-line programs and
does not run batch experiments or write result tables; loops over generated
graphs such as the example above are left to the caller.