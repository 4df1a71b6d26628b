# Copyright 2009 Yelp
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Live progress display for a running suite."""
from rich.console import Console
from rich.errors import MarkupError
from rich.markup import escape
from rich.progress import BarColumn
from rich.progress import MofNCompleteColumn
from rich.progress import Progress
from rich.progress import ProgressColumn
from rich.progress import TaskProgressColumn
from rich.progress import TimeElapsedColumn
from rich.progress import TimeRemainingColumn
from rich.text import Text


DEFAULT_TEMPLATE = (
    "Current suite: [bold]{suite}[/]\n"
    "Current test: [bold]{file}[/]\n"
    "[green]Success: {success}[/] [yellow]Errors: {errors}[/] [red]Fails: {fails}[/]"
)

TEMPLATE_FIELDS = ("suite", "file", "success", "errors", "fails")


def check_template(template):
    """Raise ValueError unless template renders with the display fields and is valid rich markup."""
    try:
        rendered = template.format(**dict.fromkeys(TEMPLATE_FIELDS, "0"))
    except (KeyError, IndexError, AttributeError) as e:
        raise ValueError("unknown field %s in template, available fields: %s" % (e, ", ".join(TEMPLATE_FIELDS)))
    except ValueError as e:
        raise ValueError("malformed template: %s" % e)
    try:
        Text.from_markup(rendered)
    except MarkupError as e:
        raise ValueError("invalid markup in template: %s" % e)


class ProgressBar(object):
    """Interface of the progress display used by the reporter.

    Every method is a no-op here, so an instance of this class is also the
    renderer for silent runs.
    """

    def start(self, total):
        """Begin a new bar with `total` steps. total may be None when the suite size is unknown."""
        pass

    def advance(self):
        pass

    def set_field(self, name, value):
        """Set a named value shown by the display template. May be called before start()."""
        pass

    def finish(self):
        pass

    def log(self, message):
        """Print a message above the live display."""
        pass


class StatusColumn(ProgressColumn):
    """Renders the display template with the fields of the task."""

    def __init__(self, template=DEFAULT_TEMPLATE):
        super(StatusColumn, self).__init__()
        self.template = template

    def render(self, task):
        fields = dict((name, escape(str(value))) for name, value in task.fields.items())
        return Text.from_markup(self.template.format(**fields))


class RichProgressBar(ProgressBar):

    def __init__(self, template=DEFAULT_TEMPLATE, stream=None):
        check_template(template)
        self.template = template
        self.console = Console(file=stream)
        self.fields = {}
        self.progress = None
        self.task_id = None

    def _build_progress(self):
        return Progress(
            StatusColumn(self.template),
            BarColumn(style='cyan', complete_style='cyan', finished_style='cyan'),
            MofNCompleteColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=self.console,
        )

    def start(self, total):
        self.finish()
        self.progress = self._build_progress()
        self.task_id = self.progress.add_task('', total=total, **self.fields)
        self.progress.start()

    def advance(self):
        if self.progress is not None:
            self.progress.advance(self.task_id)

    def set_field(self, name, value):
        self.fields[name] = value
        if self.progress is not None:
            self.progress.update(self.task_id, **{name: value})

    def finish(self):
        if self.progress is None:
            return
        self.progress.refresh()
        self.progress.stop()
        self.progress = None
        self.task_id = None

    def log(self, message):
        # a running Progress redraws itself below anything printed on its console
        self.console.print(message, markup=False, highlight=False)
