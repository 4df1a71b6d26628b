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
"""Progress bar and failed test report for Testify runs.

    - RunStatus
        success / fail / error counters for the suite being run

    - FailureReportWriter
        collects failed test names and writes them to a uniquely named file at the end of the run

    - ProgressBar / RichProgressBar
        the live display, a no-op by default and rendered with rich otherwise

The Testify plugin tying these together lives in testify_progress/plugins/progress_reporter.py.
"""
# flake8: noqa
from .exceptions import PersistenceError, TestifyProgressError
from .failure_report import FailureReportWriter
from .progress_bar import DEFAULT_TEMPLATE, ProgressBar, RichProgressBar
from .run_status import RunStatus, StatusSnapshot

__version__ = "0.1.0"
