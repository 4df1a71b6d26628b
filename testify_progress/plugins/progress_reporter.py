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

"""Show a live progress bar while tests run and write the failed tests to a report file.

Enable with --progress, after adding this directory to TESTIFY_PLUGIN_PATH. The
report file can be passed back to --rerun-test-file.
"""
import logging
from optparse import OptionValueError

from testify import test_logger
from testify import test_reporter

from testify_progress.exceptions import PersistenceError
from testify_progress.failure_report import FailureReportWriter
from testify_progress.progress_bar import DEFAULT_TEMPLATE
from testify_progress.progress_bar import ProgressBar
from testify_progress.progress_bar import RichProgressBar
from testify_progress.progress_bar import check_template
from testify_progress.run_status import RunStatus


log = logging.getLogger('testify.progress.plugin')


class ProgressReporter(test_reporter.TestReporter):
    """Feeds test case and test method events into a RunStatus, a FailureReportWriter and a ProgressBar.

    Each TestCase is treated as a suite: its counters and its bar start over
    when it starts. Failed tests are collected for the whole run.
    """

    def __init__(self, options, progress_bar=None, writer=None):
        super(ProgressReporter, self).__init__(options)
        self.progress_bar = progress_bar if progress_bar is not None else ProgressBar()
        self.writer = writer if writer is not None else FailureReportWriter()
        self.status = RunStatus()
        self.expected_test_count = None

    def expect_tests(self, count):
        """Size of the next test case to start, None when unknown."""
        self.expected_test_count = count

    def _update_counters(self):
        snapshot = self.status.snapshot()
        self.progress_bar.set_field('success', snapshot.success)
        self.progress_bar.set_field('fails', snapshot.fail)
        self.progress_bar.set_field('errors', snapshot.error)

    def test_case_start(self, result):
        self.status.reset()
        self.progress_bar.finish()
        self.progress_bar.set_field('file', 'none')
        self.progress_bar.set_field('suite', result['method']['class'])
        self._update_counters()
        self.progress_bar.start(self.expected_test_count)
        self.expected_test_count = None

    def test_start(self, result):
        self.progress_bar.set_field('file', result['method']['name'])

    def test_complete(self, result):
        if result['success']:
            self.status.inc_success()
        elif result['failure']:
            self.status.inc_fail()
            self.record_failure(result, 'FAIL')
        elif result['error']:
            self.status.inc_error()
            self.record_failure(result, 'ERROR')

        self.progress_bar.advance()
        self._update_counters()

    def record_failure(self, result, label):
        self.writer.record_failure(result['method']['full_name'])
        self.print_failure(result, label)

    def print_failure(self, result, label):
        self.progress_bar.log("%s: %s" % (label, result['method']['full_name']))
        if result['exception_info']:
            self.progress_bar.log(result['exception_info'])

    def class_teardown_complete(self, result):
        # not a test, so not counted or added to the rerun report
        if not result['success']:
            self.print_failure(result, 'FAIL' if result['failure'] else 'ERROR')

    def test_case_complete(self, result):
        self.progress_bar.finish()

    def report(self):
        self.progress_bar.finish()
        try:
            path = self.writer.write_report(self.options.failed_tests_dir)
        except PersistenceError:
            log.exception("Failed tests were NOT saved")
            return False

        if path:
            self.progress_bar.log("Failed tests written to %s" % path)
        else:
            self.progress_bar.log("No failures recorded")
        return True


def progress_enabled(options):
    if not options.progress_bar:
        return False
    # Don't show the progress bar when test output is verbose or a debugger may take over the terminal
    if options.verbosity >= test_logger.VERBOSITY_VERBOSE or options.debugger:
        log.debug("progress bar disabled by --verbose/--pdb")
        return False
    return True


def _store_progress_format(option, opt_str, value, parser):
    try:
        check_template(value)
    except ValueError as e:
        raise OptionValueError("option %s: %s" % (opt_str, e))
    setattr(parser.values, option.dest, value)


# Hooks for plugin system

def add_command_line_options(parser):
    parser.set_defaults(progress_silent=False)
    parser.add_option(
        "--progress",
        action="store_true",
        dest="progress_bar",
        default=False,
        help="Show a progress bar instead of per-test output and write failed tests to a report file",
    )
    parser.add_option(
        "--failed-tests-dir",
        action="store",
        dest="failed_tests_dir",
        type="string",
        default=".",
        metavar="DIR",
        help="Directory for the failed tests report written by --progress",
    )
    parser.add_option(
        "--progress-format",
        action="callback",
        callback=_store_progress_format,
        dest="progress_format",
        type="string",
        default=DEFAULT_TEMPLATE,
        metavar="TEMPLATE",
        help=(
            "rich markup shown above the progress bar. Available fields: "
            "{suite}, {file}, {success}, {errors}, {fails}"
        ),
    )


def prepare_test_program(options, program):
    if progress_enabled(options):
        # keep the text logger from writing over the live display
        options.progress_silent = options.verbosity == test_logger.VERBOSITY_SILENT
        options.verbosity = test_logger.VERBOSITY_SILENT


def build_test_reporters(options):
    if not progress_enabled(options):
        return []
    if options.progress_silent:
        progress_bar = ProgressBar()
    else:
        progress_bar = RichProgressBar(options.progress_format)
    return [ProgressReporter(options, progress_bar=progress_bar)]


def add_testcase_info(test_case, runner):
    count = sum(1 for _ in test_case.runnable_test_methods())
    for reporter in runner.test_reporters:
        if isinstance(reporter, ProgressReporter):
            reporter.expect_tests(count)
