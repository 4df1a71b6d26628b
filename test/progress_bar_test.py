import io

from rich.console import Console
from rich.progress import Progress
from testify import TestCase, assert_equal, assert_in, assert_is, assert_not_in, assert_raises, run, setup

from testify_progress.progress_bar import DEFAULT_TEMPLATE
from testify_progress.progress_bar import ProgressBar
from testify_progress.progress_bar import RichProgressBar
from testify_progress.progress_bar import StatusColumn
from testify_progress.progress_bar import check_template


DISPLAY_FIELDS = dict(suite='SampleTestCase', file='test_method', success=3, errors=1, fails=2)


class StatusColumnTestCase(TestCase):

    def render(self, template, **fields):
        progress = Progress(console=Console(file=io.StringIO()))
        progress.add_task('', total=5, **fields)
        return StatusColumn(template).render(progress.tasks[0]).plain

    def test_default_template(self):
        assert_equal(
            self.render(DEFAULT_TEMPLATE, **DISPLAY_FIELDS),
            "Current suite: SampleTestCase\n"
            "Current test: test_method\n"
            "Success: 3 Errors: 1 Fails: 2",
        )

    def test_custom_template(self):
        assert_equal(self.render("[blue]{suite}[/] {success}/{fails}", **DISPLAY_FIELDS), "SampleTestCase 3/2")

    def test_field_values_are_not_markup(self):
        fields = dict(DISPLAY_FIELDS, suite='[bold]Weird[/bold]')
        assert_equal(self.render("{suite}", **fields), '[bold]Weird[/bold]')


class CheckTemplateTestCase(TestCase):

    def test_valid_templates(self):
        check_template(DEFAULT_TEMPLATE)
        check_template("[blue]{suite}[/] {success}/{fails}")
        check_template("no fields at all")

    def test_unknown_field(self):
        with assert_raises(ValueError):
            check_template("{memory} {suite}")

    def test_positional_field(self):
        with assert_raises(ValueError):
            check_template("{0}")

    def test_unbalanced_brace(self):
        with assert_raises(ValueError):
            check_template("Suite: {suite")

    def test_bad_markup(self):
        with assert_raises(ValueError):
            check_template("[/bold]{suite}")

    def test_rich_progress_bar_rejects_bad_template(self):
        with assert_raises(ValueError):
            RichProgressBar(template="{memory} {suite}", stream=io.StringIO())


class NullProgressBarTestCase(TestCase):

    def test_everything_is_a_no_op(self):
        bar = ProgressBar()
        bar.set_field('suite', 'SampleTestCase')
        bar.start(None)
        bar.advance()
        bar.log('message')
        bar.finish()
        bar.finish()


class RichProgressBarTestCase(TestCase):

    @setup
    def build_bar(self):
        self.stream = io.StringIO()
        self.bar = RichProgressBar(stream=self.stream)
        self.bar.console = Console(file=self.stream, width=200)

    def test_finished_bar_shows_final_state(self):
        for name, value in DISPLAY_FIELDS.items():
            self.bar.set_field(name, value)
        self.bar.start(2)
        self.bar.advance()
        self.bar.set_field('success', 4)
        self.bar.advance()
        self.bar.finish()

        output = self.stream.getvalue()
        assert_in('Current suite: SampleTestCase', output)
        assert_in('Success: 4 Errors: 1 Fails: 2', output)
        assert_in('2/2', output)

    def test_fields_set_before_start_are_kept(self):
        self.bar.set_field('suite', 'Early')
        self.bar.start(1)
        assert_equal(self.bar.progress.tasks[0].fields['suite'], 'Early')
        self.bar.finish()

    def test_unknown_total(self):
        for name, value in DISPLAY_FIELDS.items():
            self.bar.set_field(name, value)
        self.bar.start(None)
        self.bar.advance()
        assert_is(self.bar.progress.tasks[0].total, None)
        self.bar.finish()

    def test_finish_without_start(self):
        self.bar.finish()
        assert_is(self.bar.progress, None)
        assert_equal(self.stream.getvalue(), '')

    def test_start_finishes_previous_bar(self):
        for name, value in DISPLAY_FIELDS.items():
            self.bar.set_field(name, value)
        self.bar.start(1)
        first_progress = self.bar.progress
        self.bar.start(3)

        assert_is(first_progress.live.is_started, False)
        assert_equal(self.bar.progress.tasks[0].total, 3)
        self.bar.finish()

    def test_log(self):
        self.bar.log('FAIL: some.module SampleTestCase.test_method [x]')
        assert_in('FAIL: some.module SampleTestCase.test_method [x]', self.stream.getvalue())

    def test_advance_without_start(self):
        self.bar.advance()
        assert_not_in('/', self.stream.getvalue())


if __name__ == '__main__':
    run()
