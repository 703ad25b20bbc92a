# polyglot_content

Helpers for text that exists in several languages.

The package has two modules:

- `polyglot_content.langs`: a fixed set of known languages (`Lang`), with
  lookup by code and conversions to and from JSON and database column values.
- `polyglot_content.content`: `Content`, a string holding one value per
  language, and `Chain`, an ordered list of fallback languages used to pick the
  best available translation.

There are no dependencies beyond the standard library.

## Installation

```
pip install polyglot_content
```

## Languages

`polyglot_content.langs` defines one `Lang` constant per known language:
`CA`, `DE`, `DE_DE`, `EN`, `EN_GB`, `EN_US`, `ES`, `ES_ES`, `EU`, `FR`,
`FR_FR`, `IT`, `IT_IT`, `JA`, `PT`, `PT_PT` and `RU`. They are listed in that
order in `ALL`. `EMPTY` is the language with no code.

Each `Lang` is a frozen dataclass with three fields: `code` (for example
`"en-GB"`), `native` (the language's own name, for example `"English"`) and
`group` (the base language, for example `"en"`).

```python
from polyglot_content.langs import EN, parse, is_valid, native_name, UnknownLangError

es = parse("ES")       # matching ignores case
str(es)                # "es"
es.native              # "Español"
is_valid("en")         # True
is_valid("foo")        # False
native_name(EN)        # "English", the same as EN.native

try:
    parse("foo")
except UnknownLangError as exc:
    print(exc)         # langs: unknown code "foo"
```

`UnknownLangError` is a subclass of `ValueError`.

Conversions:

- `lang.to_json()` gives the code as a JSON string; `Lang.from_json(data)`
  reads one back from `str` or `bytes`. It raises `ValueError` when the input
  is not a JSON string.
- `Lang.from_text(text)` looks up a code, ignoring case.
- `lang.to_db()` gives the code for a database column; `Lang.from_db(value)`
  accepts `str` or `bytes` and raises `TypeError` for `None` or any other type.

`from_json`, `from_text` and `from_db` give `EMPTY` for a code that is not
known; `lang.is_empty()` tells whether a language is `EMPTY`.

## Translatable content

```python
from polyglot_content.content import Chain, Content
from polyglot_content.langs import EN, ES, PT

title = Content({ES: "Hola", EN: "Hello"})
title.get(ES)                 # "Hola"
title.get(PT)                 # "" when there is no value
title.set(ES, "")             # an empty value removes the language
title.plain_dict()            # {"en": "Hello"}

chain = Chain(EN, ES)
title.get_chain(chain, PT)    # "Hello", found through the chain
```

Building content:

- `Content(values)` takes a mapping of `Lang` to string, or nothing for empty
  content.
- `Content.single(lang, value)` holds a single value.
- `Content.parse(values)` takes a mapping of code to string. A code that is not
  known raises `UnknownLangError` (message `unknown lang "<code>"`). Codes are
  checked ignoring case, but a value is stored only when its code is written
  exactly as the language's code.

Reading and changing:

- `get(lang)`, `set(lang, value)`, `clear(lang)`, `clear_all()`, `is_empty()`.
- `to_dict()` returns a copy keyed by `Lang`; `plain_dict()` a copy keyed by
  code.
- `Content` supports `len()`, iteration over its languages and `==`.

`get_chain(chain, lang)` picks a value in this order:

1. the value for `lang` itself;
2. the first value whose language has the same group as `lang`, then as each
   of the chain's fallbacks in turn;
3. any value that is present.

Empty content gives an empty string.

## JSON and database values

`content.to_json()` writes a JSON object keyed by language code, with keys
sorted. Content without values gives `{}`. `Content.from_json(data)` reads
such an object from `str` or `bytes`. It raises `ValueError` for invalid JSON,
for anything other than an object, or for values that are not strings. Codes
that are not known are read as `EMPTY`.

`content.to_db()` gives the same JSON text, to store in a text column.
`Content.from_db(value)` reads it back. A `None` (SQL NULL) gives empty
content, and any type other than `str` or `bytes` raises `TypeError`.

The package does not open database connections or talk to a database itself.
`to_db` and `from_db` only produce and accept plain column values, which you
pass to and from a driver such as `sqlite3`:

```python
import sqlite3
from polyglot_content.content import Content
from polyglot_content.langs import EN, ES

db = sqlite3.connect(":memory:")
db.execute("CREATE TABLE texts (name TEXT PRIMARY KEY, value TEXT)")
db.execute(
    "INSERT INTO texts VALUES (?, ?)",
    ("greeting", Content({ES: "Hola", EN: "Hello"}).to_db()),
)
(raw,) = db.execute("SELECT value FROM texts WHERE name = 'greeting'").fetchone()
Content.from_db(raw).get(EN)  # "Hello"
```

## Running the tests

```
pip install -e ".[test]"
pytest
```