# smartcommunity

Record keeping for a residential community in one SQLite database:
staff accounts, owners, parking spots and rental applications, property
registration documents, and fee payments.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
smartcommunity [--db FILE] [--user USERNAME]
```

The command opens the database (`sql1.db` by default, or `--db FILE`)
and creates any missing tables. With `--user`, it looks the user up and
prints a time-of-day greeting, the user's name and their role
(`admin`, `staff` or `owner`). It exits with status 1 if the user does
not exist or has an unknown role code.

## Library use

All storage goes through `smartcommunity.database.Database`, a context
manager that closes its connection on exit. `create_schema()` creates
the tables `Users`, `owner`, `payment`, `parking_spot`,
`parking_application` and `owner_property` if they are missing.

```python
from smartcommunity.database import Database

with Database("community.db") as db:
    db.create_schema()
    db.add_owner("Li Hua", "T-0001", "3", "2", "5", "502")
```

`Database` also offers:

- `query(sql, params)` – run one statement and return its rows.
- `add_user(...)` / `add_owner(...)` – return `False` when the username
  or telephone is already registered.
- `add_payment(...)` – returns the new payment's id. Times given as
  `datetime` are stored as `YYYY-MM-DD HH:MM:SS`.
- `update_staff(...)` / `update_owner(...)` – return whether a row changed.
- `update_payment(payment_type, time, amount)` – marks matching payments
  as paid and returns how many were updated.
- `get_user_by_username`, `get_username_by_id`, `get_user_id_by_username`,
  `get_payment_id_by_time` – return `None` when nothing matches.

### Parking

`smartcommunity.parking` registers and edits spots and handles rentals.
`parse_size` and `parse_charge` turn the form labels ("大"/"小",
"有"/"无") into 1/0; any other label gives 0.

```python
from smartcommunity import parking

spot_id = parking.add_spot(db, "B1-17", 1, parking.parse_size("大"), parking.parse_charge("有"))
spot = parking.get_spot(db, spot_id)          # KeyError if unknown
application = parking.find_rent_application(db, spot_id)
```

`update_spot` edits a spot and frees it from any owner.
`rent_spot(db, spot_id)` gives the spot to the owner with the earliest
matching application (same floor, size and charger), records the spot
on that owner, and returns the `RentApplication`; it raises
`NoApplicationError` when nobody has applied.

### Property documents

`smartcommunity.property` lists an owner's properties as
`PropertyRecord` objects and records which of the ten registration
documents have an electronic copy on file. `status_label` and
`parse_status` convert between the stored 0/1 and the labels
"未上传电子版" / "已上传电子版".

```python
from smartcommunity import property as prop

records = prop.list_properties(db, owner_id=1)
prop.update_documents(db, records[0].id, 1, [True] * 10)
```

`update_documents` takes exactly ten statuses (labels, booleans or
integers) and raises `ValueError` otherwise.

### Payments

`smartcommunity.payment.confirm_payment(db, payment_type, time, amount)`
marks the matching payments as paid and returns how many there were.

### Greeting

`smartcommunity.greeting.greeting_for(hour)` returns a `Greeting` with
its `text` and `icon`: morning for hours 6 to 12, evening for 19 to 23,
afternoon for every other hour. Hours outside 0–23 raise `ValueError`.
`greet(now)` does the same for a `datetime`, or for the current time.

## What it does not do

There are no windows or screens: no login form, and the command does not
check passwords. Repair requests, attendance, leave approval, price
settings and the other staff and owner screens have no counterpart here;
the package stores and updates the records listed above and nothing more.