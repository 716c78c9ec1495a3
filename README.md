# weaves

A small library with two halves:

- **Orders**: partially ordered sets of integers, the relations that order
  them, and sort strategies that can be plugged into them.
- **Weaves and hacks**: a *weave* is a project directory under the
  `WEAVES_HOME` directory. Its `hack` sub-directory holds *hack* scripts that
  automate tasks for that project. The library finds those scripts and the
  interpreter named by each one's shebang line. It also offers a
  key-driven picker model for choosing one.

## Installation

Install the package with your usual Python packaging tool. It has no
runtime dependencies beyond the standard library. The `test` extra pulls in
pytest.

## Orders

`weaves.order` provides two relations, `Leq` (`a <= b`) and `Lt` (`a < b`).
Each one has `compare(a, b)` and can check `reflexivity(a)`,
`antisymmetry(a, b)` and `transitivity(a, b, c)`. Both derive from the
abstract `Relation`.

A `Poset` is a frozen dataclass that pairs a tuple of integers (`members`)
with a relation (`order`):

```python
from weaves.order import Poset, Leq, Lt, random_poset
from weaves.mergesort import Mergesort

poset = Poset([3, 1, 2], Leq())
poset.is_partially_ordered()    # True: <= is a partial order

Poset([1, 2, 3], Lt()).is_partially_ordered()  # False: < is not reflexive

ordered = poset.sort(Mergesort())  # a new Poset with members (1, 2, 3)

big = random_poset(Leq())          # 100 random non-negative integers
```

`is_partially_ordered()` checks reflexivity, antisymmetry and transitivity
over every combination of members.

`Poset.sort(strategy)` returns `strategy.run(poset)`. Any object with a
`strategy()` method that returns its name and a `run(poset)` method that
returns a new poset can be used. `SortStrategy` is the abstract base for
such objects. `Mergesort` is the strategy provided, and its name is
`"Mergesort"`. `weaves.mergesort` also exposes the plain functions
`merge(xs, ys, order)`, which merges two sorted sequences, and
`merge_sort(xs, order)`. Both return lists.

`weaves.fake` offers `random_int()` and `random_ints(n)` for test data.
`random_int()` returns a non-negative integer below `sys.maxsize`.
`random_ints(n)` raises `ValueError` when `n` is negative.

## Weaves and hacks

Set `WEAVES_HOME` to the directory that holds your projects:

```
$WEAVES_HOME/
    myproject/
        hack/
            build.sh
            report.py
```

```python
from weaves.hacks import Weave

weave = Weave("myproject")
for hack in weave.hacks():
    print(hack.name, hack.path, hack.runtime())
```

- `Weave.root()` is `"$WEAVES_HOME/<project>"`.
- `Weave.files()` lists the entries directly under that root, sorted by name.
- `Weave.hack_dir()` returns the entry of the `hack` directory.
- `Weave.hacks()` walks the hack directory depth first, in name order. It
  returns a `Hack` for every regular file it finds, including files in
  sub-directories. The list is cached on the weave after the first call.

A hack's `runtime()` is the first line of the script with every `#!`
removed. It is `/bin/sh` when the script is empty. `is_hack(name)` tells
whether a directory name is `hack`. `weaves_home()` returns the value of
`WEAVES_HOME`.

Errors are raised as exceptions:

- `MissingWeavesHomeError` when `WEAVES_HOME` is not set;
- `NoHackDirError` when the project has no `hack` directory.

Both are subclasses of `LookupError`.

## Picking a hack

`weaves.picker.HackPicker` holds a list of hacks and a cursor. It is driven
one key name at a time:

```python
from weaves.picker import HackPicker

picker = HackPicker.from_project("myproject")
print(picker.view())
picker.update("down")
finished = picker.update("enter")
picker.selected   # the chosen Hack, or None if the picker was quit
```

`update(key)` returns whether the picker has finished. These keys are
handled:

- `q` or `ctrl+c` quits without a choice.
- `enter` or space selects the highlighted hack.
- `up`/`k` and `down`/`j` move the cursor.
- `left`/`h`/`pgup`/`b`/`u` and `right`/`l`/`pgdown`/`f`/`d` change page.
- `home`/`g` and `end`/`G` jump to the first or the last hack.

`select()` picks the hack under the cursor directly. It raises
`LookupError` when there are no hacks.

`view()` returns the title, the current page of numbered hacks, and a help
line. `render_item(index, hack, selected)` formats one numbered line.
`KeyBinding` and `KeyMap` describe the quit and select keys, and
`DEFAULT_KEY_MAP` is the map a picker uses unless it is given another one.

## What it does not do

The package has no command-line program. It does not run a terminal user
interface: `HackPicker` only tracks state and renders text, so the caller
must read keys and draw the view. It also never executes a hack script. It
reports each script's path and interpreter, and running the script is left
to the caller.