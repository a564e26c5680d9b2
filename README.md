# morphtables

This package builds and inspects the binary tables used by a dictionary-based
morphological analyser for Russian and English. It uses only the standard
library.

## Commands

### `morphtables-lexmap`

    morphtables-lexmap dictionary.txt

This command reads a dictionary source and collects every `LID:nnn` mark. A
mark only counts when whitespace comes before it. The number may be decimal,
hex (`0x...`) or octal (`0...`). If an identifier is used twice, the command
prints a warning to stderr.

The report has three parts:

- the minimal lexeme, with its value also in hex;
- the maximal lexeme, in the same form;
- one line for every hole between them, giving its size and bounds.

The command exits with 1 when no file name is given and with 2 when the file
cannot be opened.

### `morphtables-makeich`

    morphtables-makeich [-w] tables.src tables.bin tables.idx

This command compiles stem-interchange table sources. It writes two files:

- `tables.bin`: the binary interchange tables. The file starts with the magic
  `interc`.
- `tables.idx`: the reference index, which maps table names to their
  condition sets.

The sources are read as code page 866. Use `-w` if they are in Windows-1251.

A source contains blocks of this form:

    .table 1a, 2a
    {
    condition, step0, step1[, step2 ...]
    }

`''` stands for an empty step. The Russian spelling `.таблица` works in place
of `.table`. The line `.include name` (or `.включить name`) compiles another
file, looked up relative to the including one.

An error names the file and line where it happened, and the command exits
with 1.

## Library

- `morphtables.lexmap`:
  - `LexIdMap` holds the identifiers. It has `insert`, `min_id`, `max_id`,
    `next_hole` and `holes`, and supports `in`.
  - `parse_lid` reads a mark from one line.
  - `scan_lines` builds the map from lines of text.
  - `report` produces the text of the report.
- `morphtables.stringbox.StringBox` is a pool of unique strings. Each string
  keeps a fixed offset. Its methods are `add_string`, `offset_of`, `string_at`
  and `serialize`. `serialize` writes each string as a length byte followed by
  its bytes.
- `morphtables.flexbox.FlexBox` builds flexion tables from `|`-separated
  flexion lists. `add_table` registers a list and returns the table offset.
  `serialize_strings` and `serialize_flexions` produce the output, and the
  flexion tables start with `FLEX`.
- `morphtables.chartype` works on Windows-1251 text:
  - `char_type` gives the class of a byte as a `CharType` value.
  - `to_lower` and `to_upper` map letter case; `to_lower` turns `ё` and `Ё`
    into `е`.
- `morphtables.interchange` holds the table model that `morphtables-makeich`
  fills: `Interchange`, `Conditions`, `Collector` and `parse_table_index`.
- `morphtables.ichcompiler` holds the compiler itself:
  - `SourceReader` reads the source lines.
  - `make_table` compiles one table block and `compile_source` compiles a
    whole source.
  - Errors are raised as `CompileError`.
- `morphtables.alternator`:
  - `Alternator.load` reads a reference index.
  - `Alternator.find` picks the interchange whose default step ends the stem
    and whose condition fits the word type and remark. It returns 0 when none
    fits.
  - `default_fragment`, `min_max_char` and `map_mix_type` read single tables.
- `morphtables.wordinfo`:
  - `StemInfo.load` decodes a stem class record.
  - `is_verb` and `is_adjective` test a word type.
- `morphtables.lexinfo`:
  - `MorphClass` has `buffer_length` and `serialize`.
  - `LexemeInfo` is the record of a resolved stem.
  - The comment helpers are `get_remark`, `is_reflexive`, `case_scale` and
    `get_postfix`.
- `morphtables.stems`:
  - `split_article` splits a dictionary article into its fields and replaces
    `ё` with `е` in the normal form.
  - `parse_switches` reads the `-name=value` switches of a dictionary build
    and applies their defaults.
  - `mix_type` maps a word type to its interchange level kind.
  - `StemEntry` sorts in dictionary order.
- `morphtables.dumpdiff`:
  - `cut_common_stem` and `format_entry` produce dictionary dump lines.
  - `read_dump_lines` reads a dump.
  - `diff_dumps` yields `<<` and `>>` lines for the differences between two
    dumps.

Example:

    from morphtables.alternator import Alternator
    from morphtables.interchange import Collector, Interchange

    steps = Interchange()
    steps.add_step("ок", 0)
    steps.add_step("к", 1)

    tables = Collector()
    tables.add_interchange("1a", "о", steps)
    tables.relocate_tables()
    binary = tables.store_tables()
    references = tables.store_references()

    offset = Alternator().load(references).find(binary, "1a", 7, "молоток", "")

## What it does not do

This package is not a morphological analyser. It does not lemmatize words or
build word forms.

It also does not run a full dictionary build:

- It can parse the build switches and split articles.
- It does not resolve a whole article into its stem class.
- It does not write the compiled dictionary files.

There is no command that dumps a compiled dictionary. `morphtables.dumpdiff`
only formats and compares dumps that you already have.