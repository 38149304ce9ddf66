# morphdic

`morphdic` reads the binary dictionaries used for Japanese morphological
analysis. It also prepares input text for analysis. It is written in pure
Python and has no runtime dependencies.

## What it covers

- **Dictionary headers** (`morphdic.header`): `Header.parse` reads the version,
  creation time and description. `Header.has_grammar()` and
  `Header.has_synonym_group_ids()` report what the dictionary carries.
- **Grammar** (`morphdic.grammar`): `Grammar` holds the part-of-speech list and
  the connection-cost matrix (`morphdic.connect.ConnectionMatrix`).
- **Lexicons** (`morphdic.lexicon`, `morphdic.lexicon_set`): these cover
  double-array trie lookups (`morphdic.trie.Trie`), word id tables, word
  parameters and word information records. A `LexiconSet` combines a system
  lexicon with up to 14 user lexicons.
- **Loading** (`morphdic.loader`): `DictionaryLoader.read_system_dictionary`
  and `DictionaryLoader.read_user_dictionary` read raw dictionary bytes.
  `LoadedDictionary.from_system_dictionary` also attaches a character
  category file.
- **Character categories** (`morphdic.character_category`,
  `morphdic.category_type`): these parse `char.def`-style definitions and give
  fast lookup of the `CategoryType` flags for each code point.
- **Word ids** (`morphdic.word_id`): `WordId` packs a 4-bit dictionary id and
  a 28-bit word id into one value.
- **Input text** (`morphdic.input_buffer`, `morphdic.edit`): `InputBuffer`
  keeps the original text and the normalized text, together with byte and
  character mappings between them. It also holds per-character categories and
  beginning-of-word markers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Looking up a word in a system dictionary:

```python
from pathlib import Path

from morphdic.loader import LoadedDictionary

data = Path("system.dic").read_bytes()
dictionary = LoadedDictionary.from_system_dictionary(data, "char.def")

text = "東京都".encode("utf-8")
for entry in dictionary.lexicon_set.lookup(text, 0):
    info = dictionary.lexicon_set.get_word_info(entry.word_id)
    print(entry.end, info.surface, info.reading_form)
```

Character categories:

```python
from morphdic.category_type import CategoryType
from morphdic.character_category import CharacterCategory

categories = CharacterCategory.from_lines([
    "0x0030..0x0039 NUMERIC",
    "0x4E00..0x9FFF KANJI",
])
assert categories.get_category_types("5") == CategoryType.NUMERIC
for (start, end), category in categories:
    print(hex(start), hex(end), category.describe())
```

Editing input text while keeping track of the original offsets:

```python
from morphdic.input_buffer import InputBuffer

buffer = InputBuffer.from_text("宇宙人")
with buffer.edit() as editor:
    editor.replace(3, 6, "銀")
print(buffer.current())         # 宇銀人
print(buffer.orig_slice(3, 6))  # 宙
```

Errors are raised as subclasses of `morphdic.errors.SudachiError`. For example,
`HeaderError`, `CharacterCategoryError` and `InputTooLongError` are all
subclasses of it.