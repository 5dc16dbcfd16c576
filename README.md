# filtervars

Named variables for rule-based filters. Each variable has a name, says
whether its value may be cached for the life of one evaluation, and
resolves its value from a request context, from the data being filtered,
or from the clock.

## Install

    pip install filtervars

## The request context

`filtervars.request_context.RequestContext` is a frozen dataclass with
the fields `ip`, `channel`, `device`, `platform`, `referer`, `ua`, `uid`,
`user_tag` and `version`, plus a `values` mapping for custom values.
Fields that were never set hold the `UNSET` marker.

- `replace(**fields)` returns a copy with the given fields changed; an
  unknown field name raises `TypeError`.
- `with_value(key, value)` returns a copy with a custom value added.
- `lookup(key)` returns a custom value, or `None` when there is none.

## Resolving a variable

Variables live in a registry in `filtervars.registry`. The built-in
variables are registered when their module is imported, so import the
modules whose variables you want. Look a variable up by name with
`get` (it returns `None` for a name nothing handles) and resolve it with
`get_value`. Variables marked cacheable are stored in the cache you pass
in (any mutable mapping, or `None` for no caching) so that one
evaluation computes them only once.

```python
import filtervars.context_vars  # registers the context variables
from filtervars.registry import get, get_value
from filtervars.request_context import RequestContext

ctx = RequestContext().replace(platform="ios", version="v1.0.0")
cache = {}

platform = get("platform")
print(get_value(ctx, platform, None, cache))   # ios
```

A variable that cannot produce a value raises `VariableError`, for
example `"platform not found in context"`. `get_value` raises
`VariableError("empty variable")` when given `None`.

## Built-in variables

From the request context (`filtervars.context_vars`):

- `channel`, `device`, `ip`, `platform`, `referer`, `ua`, `uid`,
  `user_tag`, `version`: the context field of that name; raises
  `VariableError` when the field is unset.
- `is_login`: `True` when `uid` is set and is not blank; `None`,
  `False` and whitespace-only values count as not logged in.
- `ctx.<key>`: the custom value stored with `with_value`, or `None`.

From the data (`filtervars.data_vars`):

- `data.<path>` walks dicts, lists and object attributes along a dotted
  path, e.g. `data.user.Works.0.WorkName`. Numeric segments index
  sequences; names starting with `_` are never read. A path that does
  not resolve raises `VariableError("data.<path> not found in data")`.
  If the data has a `value(ctx, key)` method, that is called instead.
  The walk itself is available as `lookup(obj, key)`, which raises
  `KeyError`.
- `freq.<key>` calls the data's `frequency_value(ctx, key)`; it gives
  `0` when the data has no such method.

Others (`filtervars.builtin_vars`):

- `rand`: a new random integer from 1 to 100 on every evaluation.
- `success`: always `1`.
- Clock fields from the current local time: `timestamp` (Unix seconds),
  `ts_simple` (an integer such as `20240131235959`), `second`, `minute`,
  `hour`, `day`, `month`, `year`, `wday` (Sunday is `0`), `date`
  (`YYYY-MM-DD`) and `time` (`YYYY-MM-DD HH:MM:SS`).

## Your own variables

Subclass `Variable`, wrap it in a `SimpleBuilder` and register it:

```python
from filtervars.registry import SimpleBuilder, Variable, register

class Tenant(Variable):
    name = "tenant"
    cacheable = True

    def value(self, ctx, data, cache):
        return ctx.lookup("tenant")

register(SimpleBuilder(Tenant(), None))
```

`SimpleBuilder` takes an optional name that overrides the variable's
own. For a family of names, subclass `Builder` with a name ending in a
dot, such as `data.`; `get` first tries the exact name, then the part
before the first dot followed by a dot. Registering `None`, an empty
name or a name twice raises `ValueError`. `Factory` gives a separate
registry; `print_registry()` prints what the default one holds.

## What it does not do

This package only resolves variable values. It does not evaluate filter
rules, does not turn an IP address into a country, province or city,
and has no variable that evaluates arithmetic expressions.