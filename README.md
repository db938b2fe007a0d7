# scoreledger

A small interactive console program that keeps a ledger of players. Each
record holds an ID, name, username, age, score and the game the player
played. Records are stored in a plain CSV file. A summary of them can be
written to a text file whenever you ask for one.

## Installing

```
pip install .
```

## Running

```
scoreledger
scoreledger --records my_records.csv --stats my_stats.txt
```

| Option      | Default       | Meaning                         |
|-------------|---------------|---------------------------------|
| `--records` | `records.csv` | CSV file to load and save       |
| `--stats`   | `stats.txt`   | file the statistics report goes to |

The program loads the records file when it starts. If the file does not
exist, it starts with no records. It then shows this menu:

```
1. Add record
2. Edit record
3. Delete record
4. Sort records
5. Find record
6. Display records
7. Output stat file

0. Save & Quit
```

- **Add record** asks for each field in turn.
  - The ID must be a non-negative integer that no other record uses.
  - Age and score must be positive integers.
  - A field you leave empty gets a default: a name becomes `NoName_<id>`, a
    username becomes `Guest_<id>`, and a game becomes `Temple Run`.
  - If you give an invalid number, you are asked again.
- **Edit record** asks for an ID, then replaces every field of that record
  except the ID. It applies the same checks and the same defaults as adding
  a record.
- **Delete record**, **Find record** and **Edit record** report
  `Invalid ID` for a negative or non-numeric ID. They report
  `Record not found` for an ID that no record uses.
- **Sort records** sorts by ID, score or age. Order choice `1` sorts
  descending; any other answer sorts ascending. Any mode other than 1, 2 or
  3 reports `Invalid mode`.
- **Display records** prints one tab-separated line per record.
- **Output stat file** writes the statistics file. With no records, the file
  contains only `No records found.`. Otherwise it contains:
  - the number of records;
  - the average age and the average score, using integer division;
  - the oldest age;
  - the highest score;
  - the time of the update, in the form `YYYY-MM-DD hh:mm:ss AM/PM`.
- **Save & Quit** writes every record back to the records file and exits.
  The records are also saved when input ends, for example on Ctrl-D.

## File format

Each line of the records file holds one record. The fields come in this
order:

```
id,name,username,age,score,game
```

For example:

```
1,Ada Lovelace,ada,36,950,Temple Run
```

When the file is read:

- blank lines are skipped;
- fields after the sixth are ignored;
- a line with fewer than six fields, or with an ID, age or score that is not
  an integer, raises `ValueError`.

## Using it as a library

```python
from scoreledger.records import RecordBook, SortField, make_user
from scoreledger.storage import load_file, save_file, write_stat_file

book = RecordBook(load_file("records.csv"))
book.add(make_user(7, "", "", 20, 300, ""))   # empty fields get their defaults
book.sort(SortField.SCORE, descending=True)
for line in book.display_lines():
    print(line)
save_file(book, "records.csv")
write_stat_file(book, "stats.txt")
```

### `scoreledger.records`

- `User` is a dataclass holding one record. Its `format()` method returns
  the display line.
- `make_user` builds a validated `User` and fills in the defaults.
- `RecordBook` holds the records. It provides:
  - `len()` and iteration;
  - `index_of`, `find`, `add`, `replace` and `delete`;
  - `sort`, which takes a `SortField` or `1`/`2`/`3`;
  - `display_lines`.
- Errors are raised as follows. All three error classes derive from
  `RecordError`.
  - `InvalidIdError` for a negative ID.
  - `RecordNotFoundError` for an unknown ID.
  - `DuplicateIdError` when `add` is given an ID that is already in use.
  - `ValueError` from `make_user` and `replace` for a non-positive age or
    score, and from `sort` for an unknown field.

### `scoreledger.storage`

- `parse_line`, `read_records` and `load_file` read records.
- `format_record` and `save_file` write them.
- `compute_stats` returns a `Stats` value, or `None` when there are no
  records.
- `render_stats` and `write_stat_file` produce the report. Both take an
  optional `now` datetime.

### `scoreledger.cli`

- `run` drives the menu loop through a `Console`. A `Console` wraps input
  and output streams.
- `main` is the `scoreledger` command.

## Limitations

Fields are written with no quoting or escaping. A name, username or game
that contains a comma cannot be read back correctly.

## Running the tests

```
pip install .[test]
pytest
```