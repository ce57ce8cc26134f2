# arcext

Building blocks for addons that consume a real-time combat event feed:

- `arcext.structs` — the event and agent records (`CombatEvent`, `Agent`) and the
  enumerations used by the feed (`CbtStateChange`, `Prof`, `WeaponSet`, `GwLanguage`, …).
  `CombatEvent.pad_value()` reads the four pad bytes as one little-endian 32-bit value.
- `arcext.mob_ids` — well-known NPC species ids as the `TargetID` and `TrashID` enums.
- `arcext.sequencer` — `EventSequencer`, which puts out-of-order events back into id
  order on a background thread and hands them to a callback.
- `arcext.combat` — `CombatEventHandler`, a base class that sorts each event into a
  named hook (`enter_combat`, `strike`, `buff_apply`, `agent_added`, …). Subclass it and
  override the hooks you need.
- `arcext.localization` — `Localization`, a per-language table of translated strings.
- `arcext.singleton` — `Singleton` and `SingletonManager` for process-wide instances that
  can be torn down in one go.
- `arcext.update_checker` — `UpdateChecker`, which finds the newest release of a
  repository, compares versions, downloads the new file and swaps it in.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Handling combat events

```python
from arcext.combat import CombatEventHandler

class Tracker(CombatEventHandler):
    def enter_combat(self, time, agent_id, subgroup, agent):
        print(f"{agent.name} entered combat in subgroup {subgroup}")

    def strike(self, time, event, source, destination, skillname, event_id):
        print(f"{source.name} hit {destination.name} for {event.value}")

tracker = Tracker()
# feed it from your event callback:
# tracker.event(event, source, destination, skillname, event_id, revision)
tracker.close()
```

Events with a non-zero id are delivered strictly in id order, starting at 2; events
sharing an id are delivered together. Events with id 0 are delivered at once when
nothing is waiting, otherwise queued behind the last numbered event. An event passed
as `None` is a tracking change: with the source's `elite` at 0 it becomes
`agent_added` or `agent_removed` (a leading `:` is stripped from the account name),
with `elite` at 1 it becomes `target_change`.

`events_pending()` tells whether anything is still queued or being delivered,
`reset()` drops the queue and restarts the ids, and `close()` stops the background
thread. Every hook calls `log()` by default, which writes to the `arcext.combat`
logger at debug level. Exceptions raised by a hook are logged by the sequencer and
delivery carries on.

`EventSequencer` can also be used on its own, as a context manager that closes
itself:

```python
from arcext.sequencer import EventSequencer

with EventSequencer(lambda ev, src, dst, skill, event_id, revision: print(event_id)) as seq:
    seq.process_event(None, None, None, None, 3, 1)
    seq.process_event(None, None, None, None, 2, 1)   # prints 2, then 3
```

## Translations

```python
from arcext.localization import Localization
from arcext.structs import GwLanguage

loc = Localization()
loc.load(GwLanguage.ENG, ["Apply", "Cancel"])
loc.load(GwLanguage.GEM, ["Anwenden", "Abbrechen"])
loc.change_language(GwLanguage.GEM)
loc.translate(0)   # "Anwenden"
```

A new `Localization` starts with no texts; ids are the positions in the order texts
were added. Unknown ids or languages raise `IndexError`. `override_translation`
replaces an existing text. `Localization.global_translate` and
`Localization.change_global_language` work on the shared instance.

## Singletons

```python
from arcext.singleton import Singleton, get_manager

class Settings(Singleton):
    ...

Settings.instance()          # created on first use
get_manager().shutdown()     # releases every singleton, newest first
```

A subclass declared with `class Foo(Singleton, auto_init=False)` must be given its
instance with `Foo.install(obj)` first; `instance()` raises `RuntimeError` otherwise.
`with_instance(action)` calls `action` only if an instance exists, and `reset()` drops it.

## Checking for updates

```python
from arcext.update_checker import UpdateChecker, Status

checker = UpdateChecker()
checker.clear_files("my_addon.dll")
state = checker.check_for_update("my_addon.dll", (1, 2, 3, 0), "owner/repository", False)
state.finish_pending_tasks()
with state.lock:
    if state.update_status is Status.UPDATE_AVAILABLE:
        checker.perform_install_or_update(state)
state.finish_pending_tasks()
```

The release feed is read from `UpdateChecker.api_base`; with `allow_prerelease` the
first entry of the release list is used, otherwise the latest release. The first asset
whose name ends in `.dll` is downloaded. An update writes `<path>.tmp`, renames the
current file to `<path>.old` and the new one into place; `clear_files` removes those
leftovers. `get_install_state` does the same for a fresh install, downloading straight
to the path. `perform_install_or_update` must be called with `state.lock` held and
raises `RuntimeError` otherwise.

`parse_version("v1.2.3")` gives `(1, 2, 3, 0)`, and strings with fewer than three
numbers give `(0, 0, 0, 0)`; `is_newer` compares only the first three parts. Override
`http_get`, `http_download` and `log` to change how releases are fetched and where
messages go.

## What this package does not do

It has no user interface: there is no update window, key-binding input, or texture
loading. It does not read the version of an installed file; pass the current version
to `check_for_update` yourself. It does not receive events from the game on its own;
your code has to feed `CombatEventHandler.event`.