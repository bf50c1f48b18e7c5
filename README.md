# dhdresolve

Orders setup modules so that every module comes after the modules it
depends on.

Each module has a name and a list of names it depends on. The
`resolve_dependencies` function in `dhdresolve.dependency_resolver` takes
such modules and returns them in an order that is safe to run. If they
cannot be ordered, it raises an error instead:

- `MissingDependencyError` if a module depends on a name that is not among
  the modules given. Its `module` and `dependency` attributes name the
  module and the name it could not find.
- `CyclicDependencyError` if modules depend on each other in a loop. Its
  `cycle` attribute lists the modules that form the loop, starting and
  ending with the same name, and the message reads like
  `Cyclic dependency detected: a -> b -> a`.

Both errors are subclasses of `DependencyError`.

## Installation

```
pip install dhdresolve
```

## Usage

```python
from dhdresolve.dependency_resolver import (
    CyclicDependencyError,
    MissingDependencyError,
    ModuleSpec,
    resolve_dependencies,
)

modules = [
    ModuleSpec("app", dependencies=["lib"]),
    ModuleSpec("lib", dependencies=["base"]),
    ModuleSpec("base"),
]

ordered = resolve_dependencies(modules)
print([m.name for m in ordered])   # ['base', 'lib', 'app']
```

`ModuleSpec` has three fields: `name`, `dependencies` (a list, empty by
default) and `payload`, a free slot for whatever you want to carry along
with the module (`None` by default).

A missing dependency names both the module and the name it could not find:

```python
try:
    resolve_dependencies([ModuleSpec("app", dependencies=["missing"])])
except MissingDependencyError as err:
    print(err.module, err.dependency)   # app missing
```

A cycle reports the modules that form it:

```python
try:
    resolve_dependencies([
        ModuleSpec("a", dependencies=["b"]),
        ModuleSpec("b", dependencies=["a"]),
    ])
except CyclicDependencyError as err:
    print(err.cycle)   # e.g. ['a', 'b', 'a']
```

`resolve_dependencies` also accepts your own objects: anything with a
`name` attribute and a `dependencies` sequence will do. The objects you
pass in are the objects you get back. If two modules share a name, the
later one replaces the earlier one.

`find_cycle(graph, start_nodes)` is also available. It takes a mapping
from each name to the names it leads to (for example, the names that
depend on it) and returns the first cycle it finds by walking from the
given start nodes, as a list whose first and last names are equal, or
`None` if there is none.

## What this package does not do

It only orders modules that you have already built. It does not find or
read module definition files, does not run any setup actions, and has no
command-line program.

## Development

```
pip install -e ".[test]"
pytest
```