# noname

Tooling for a small language used to write arithmetic circuits. The package
provides:

- a lexer (`noname.lexer`) that turns source files (`.no`) into tokens
  carrying precise spans, and a peekable token stream;
- structured compile errors (`noname.errors`) that point at the offending
  source location;
- a registry of source files (`noname.sources.Sources`);
- parsing of public and private inputs given as JSON text or a JSON file
  (`noname.inputs`);
- reading and validating `Noname.toml` package manifests (`noname.manifest`);
- dependency resolution between packages named `user/repo`
  (`noname.packages`), with cycle detection and a leaves-to-roots order;
- commands to scaffold new packages (`noname.scaffold`, `noname.cli`).

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Create a new package in a directory that does not exist yet:

```
noname new --path my_circuit
```

Add `--lib` to create a library (`src/lib.no`) instead of a binary
(`src/main.no`). For `new`, the package name is the path as given.

Turn an existing directory into a package:

```
noname init --path existing_dir
```

Without `--path`, `init` uses the current directory, and the package name is
the directory's name. In both cases the manifest names the package
`user/name`, where `user` is your `git config user.name` with spaces replaced
by underscores and lower-cased.

A new package looks like:

```
my_circuit/
├── Noname.toml
└── src/
    └── main.no
```

If the directory, the manifest, `src/` or the source file already exists
(or, for `init`, the path is missing or not a directory), the command prints
an error and exits with status 1.

## Library use

Tokenizing a file:

```python
from noname.lexer import tokenize
from noname.sources import Sources

sources = Sources()
file_id = sources.add("main.no", "fn main(pub xx: Field) {}")
tokens = tokenize(file_id, sources.get(file_id)[1])
print(tokens.peek())
```

`tokenize` returns a `Tokens` stream with `peek`, `bump`, `bump_err`,
`bump_expected` and `bump_ident`. Comments are dropped unless the
environment variable `NONAME_COMMENTS_IN_AST` is set. Invalid input raises
`noname.errors.CompileError`, whose `kind` is an `ErrorKind`, whose `span`
is a `noname.span.Span`, and whose `help` holds the rendered message; for
example one-letter identifiers raise `ErrorKind.NO_ONE_LETTER_VARIABLE`.

Reading a manifest and computing a build order:

```python
from pathlib import Path
from noname.manifest import read_manifest
from noname.packages import DependencyGraph

manifest = read_manifest(Path("my_circuit"))
graph = DependencyGraph.from_manifest(None, manifest)
for dep in graph.from_leaves_to_roots():
    print(dep)
```

Invalid manifests, invalid packages and circular dependencies raise
`noname.manifest.ManifestError`. Dependencies that are not present locally
are cloned with `git` into `~/.noname/packages/<user>/<repo>`.

Inputs can be given inline or as a path to a JSON file:

```python
from noname.inputs import parse_inputs

inputs = parse_inputs('{"xx": "1", "yy": ["2", "3"]}')
```

Text that is neither a JSON object nor a readable file raises `InputsError`;
a readable file that does not hold a JSON object raises `JsonFileError`.

## What this package does not do

The package stops at tokens. It has no parser, name resolution, type
checker or circuit generation, and cannot compute witnesses, create or
verify proofs, or export constraint systems. Accordingly there are no
`build`, `check`, `run`, `test`, `prove` or `verify` commands; the command
line only offers `new` and `init`.