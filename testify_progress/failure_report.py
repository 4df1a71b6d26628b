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

"""Collects the names of failed tests during a run and persists them at the end.

The report holds one test name per line, in the same `module Class.method`
format that `testify --rerun-test-file` reads.
"""
import collections
import logging
import os
import uuid

from testify_progress.exceptions import PersistenceError


REPORT_NAME = 'failedTests'
REPORT_EXTENSION = '.txt'

log = logging.getLogger('testify.progress.report')


class FailureReportWriter(object):

    def __init__(self):
        self.failed_tests = []

    def record_failure(self, test_id):
        """Remember a failed or errored test. Duplicates are dropped when writing."""
        self.failed_tests.append(test_id)

    def unique_report_name(self):
        return '%s_%s%s' % (REPORT_NAME, uuid.uuid4().hex, REPORT_EXTENSION)

    def write_report(self, directory):
        """Write the distinct failed test names to a fresh file in `directory`.

        Returns the path written, or None when nothing failed. Raises
        PersistenceError if the file can't be written; the recorded failures are
        kept in that case.
        """
        if not self.failed_tests:
            log.info("no failures recorded, not writing a report")
            return None

        failed_tests = list(collections.OrderedDict.fromkeys(self.failed_tests))
        path = os.path.join(directory, self.unique_report_name())
        try:
            content = '\n'.join(failed_tests).encode('utf-8')
        except UnicodeError as e:
            raise PersistenceError(path, e)

        try:
            if os.path.isfile(path):
                # remove old report
                os.remove(path)
            with open(path, 'wb') as report_file:
                report_file.write(content)
        except OSError as e:
            self._remove_partial_report(path)
            raise PersistenceError(path, e)

        log.info("wrote %d failed tests to %s", len(failed_tests), path)
        self.failed_tests = []
        return path

    def _remove_partial_report(self, path):
        if not os.path.isfile(path):
            return
        try:
            os.remove(path)
        except OSError:
            log.warning("could not remove partial report %s", path, exc_info=True)
