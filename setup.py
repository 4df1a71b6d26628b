from setuptools import setup

setup(
    name="testify-progress",
    version="0.1.0",
    provides=["testify_progress"],
    description='Progress bar and failed test report plugin for Testify',
    classifiers=[
        "Programming Language :: Python",
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Software Development :: Testing",
        "Intended Audience :: Developers",
        "Development Status :: 4 - Beta",
    ],
    install_requires=['testify', 'rich>=13.0'],
    extras_require={'test': ['mock']},
    python_requires='>=3.8',
    packages=["testify_progress", "testify_progress.plugins"],
    long_description="""testify-progress - live progress for Testify runs

A Testify plugin that replaces the per-test output with a live progress bar
(current suite, current test, success / error / fail counters) and writes the
names of failed tests to failedTests_<token>.txt at the end of the run.

Usage:

  TESTIFY_PLUGIN_PATH=/path/to/testify_progress/plugins testify tests --progress --failed-tests-dir out

The report lists one test per line and can be rerun with:

  testify --rerun-test-file out/failedTests_<token>.txt
"""
)
