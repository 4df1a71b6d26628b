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

"""Counters for the outcomes of the test suite currently being run."""
from collections import namedtuple


StatusSnapshot = namedtuple('StatusSnapshot', ('success', 'fail', 'error'))


class RunStatus(object):
    """Success / fail / error counters for one suite.

    Counters only go up; reset() is the only way back to zero and is called
    once at the start of every suite.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.success = 0
        self.fail = 0
        self.error = 0

    def inc_success(self):
        self.success += 1

    def inc_fail(self):
        self.fail += 1

    def inc_error(self):
        self.error += 1

    def snapshot(self):
        assert min(self.success, self.fail, self.error) >= 0, "negative counter in %r" % (self.__dict__,)
        return StatusSnapshot(self.success, self.fail, self.error)

    def __repr__(self):
        return "<RunStatus success=%d fail=%d error=%d>" % (self.success, self.fail, self.error)
