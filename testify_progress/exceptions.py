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


class TestifyProgressError(Exception):
    pass


class PersistenceError(TestifyProgressError):
    """The failed tests report could not be written (or a stale copy could not be removed)."""

    def __init__(self, path, cause):
        super(PersistenceError, self).__init__("Unable to write failed tests report %s: %s" % (path, cause))
        self.path = path
        self.cause = cause
