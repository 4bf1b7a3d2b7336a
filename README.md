# tasklane

A small to-do service. Users own tasks, tasks move between `pending` and
`finished`, and everything is stored through SQLAlchemy. A JSON HTTP API
built with Flask and an interactive text menu sit on top of the storage
layer. The package also has a few plain helpers for numbers, strings and
simple person records.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Storage and services

`tasklane.models` defines the SQLAlchemy models `Task` and `User` on the
declarative `Base`. A task has `id`, `user_id`, `title`, `des`, `status`
(default `"pending"`), `created_at` and `finished_at`. A user has `id`,
`name`, a unique `email`, `role` (default `"user"`) and its `tasks`.

Repositories wrap a session, and services wrap a repository:

```python
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from tasklane.models import Base
from tasklane.tasks import TaskRepository, TaskService
from tasklane.users import UserRepository, UserService

engine = create_engine("sqlite://")
Base.metadata.create_all(engine)
session = Session(engine)

users = UserService(UserRepository(session))
tasks = TaskService(TaskRepository(session))

alice = users.create_user("Alice", "alice@example.com")
task = tasks.create(alice.id, "Write report", "Quarterly numbers")
tasks.toggle(task.id)          # pending -> finished

for t in tasks.get_all_tasks():
    t.print_out()

for u in users.get_all_users():
    u.print_out()
```

Behaviour to be aware of:

- `TaskService.get_by_id` returns `None` for an unknown id.
- `UserService.get_user_by_id` raises `LookupError` for an unknown id.
- `TaskService.toggle` raises `LookupError` for an unknown id.
- Deleting an id that does not exist is not an error.

`Task.to_dict()` and `User.to_dict()` give the JSON shapes used by the API;
a task's description appears under the key `description`, and its times as
ISO 8601 strings under `createdAt` and `finishedAt`.

## HTTP API

`tasklane.api.create_app(user_service, task_service)` returns a Flask
application serving:

| Method | Path                  | Purpose                         |
|--------|-----------------------|---------------------------------|
| POST   | `/api/v1/users`       | create a user (`name`, `email`) |
| GET    | `/api/v1/users`       | list users with their tasks     |
| GET    | `/api/v1/users/<id>`  | fetch one user                  |
| POST   | `/api/v1/tasks`       | create a task (`user_id`, `title`, `description`) |
| GET    | `/api/v1/tasks`       | list tasks                      |
| GET    | `/api/v1/tasks/<id>`  | fetch one task                  |
| GET    | `/swagger/doc.json`   | Swagger 2.0 description         |

Creation answers `201`; missing or malformed fields answer `400` with
`{"error": "Invalid input"}`, and a non-numeric id answers `400` with
`{"error": "Invalid ID"}`. An unknown user id answers `404`; an unknown task
id answers `200` with `null`. Every response carries permissive CORS
headers, `OPTIONS` requests are answered directly with `200`, and each other
request is logged to standard output.

The Swagger document is also available as a dictionary from
`tasklane.docs.swagger_spec(host, base_path)`.

`tasklane.api.seed_tasks(user_service, task_service, per_user)` gives every
existing user `per_user` tasks (10 by default) titled with random numbers,
and returns the tasks it created.

```python
from tasklane.api import create_app

app = create_app(users, tasks)
app.run(port=8080)
```

## Interactive console

`tasklane.cli.TodoCli(user_service, task_service, stdin, stdout)` is a menu
loop reading from `stdin` and writing to `stdout` (the process streams by
default). Call `run()` to start it. The choices are:

- `1` add a task, `2` list all tasks
- `5` add a user, `6` list all users, `7` delete a user
- `C`/`c` clear the screen (runs `clear`, or `cls` on Windows)
- `q`/`Q` leave the menu; end of input leaves it too

Choices `3` and `4` are listed in the menu but are answered with
"Invalid choice".

```python
import sys
from tasklane.cli import TodoCli

TodoCli(users, tasks, sys.stdin, sys.stdout).run()
```

## Helpers

- `tasklane.maths`: `add`, `sub`, `mul`, `factorial` (positive integers
  only; raises `ValueError` otherwise), and the endless iterators
  `fibonacci()` (1, 1, 2, 3, 5, ...) and `counter()` (1, 2, 3, ...).
- `tasklane.stringutils`: `concat`, `reverse`, `find_string`, `is_anagram`,
  `is_palindrome`, `count_types` (returns lower, upper and digit counts) and
  `is_numeric`.
- `tasklane.people`: a `Person` record with `print` (which doubles the age
  before writing the record to standard error) and `is_equal`, and the
  filters `filter_users`, `filter_adult`, `filter_teenager` and
  `filter_by_name`.
- `tasklane.tutorial`: `Book` and `Rect` records, `number_parity(limit)`,
  `demo()` and `main()`.

The command

```
tasklane-tutorial
```

prints a short demonstration of the string helpers.

## What this package does not do

- It has no command that starts the HTTP server or the console; build them
  from your own code as shown above.
- It does not pick or configure a database: you create the SQLAlchemy engine
  and session, and the tables with `Base.metadata.create_all`.
- The API serves the Swagger description as JSON only; there is no
  browsable documentation page.
- Tasks can be toggled and deleted through the services, but not through the
  HTTP API or the console menu.