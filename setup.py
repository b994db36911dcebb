import os
import re
import subprocess
from setuptools import setup, find_packages, Command

from shellopts.app_version import version

root_dir = os.path.abspath(os.path.dirname(__file__))


class Coverage(Command):
    description = 'run tests with code coverage'
    user_options = [
        ('test-suite=', 's',
         "test suite to run (e.g. 'some_module.test_suite')"),
    ]

    def initialize_options(self):
        self.test_suite = None

    def finalize_options(self):
        pass

    def run(self):
        env = dict(os.environ)
        env.update({
            'COVERAGE_FILE': os.path.join(root_dir, '.coverage'),
            'COVERAGE_PROCESS_START': os.path.join(root_dir, 'setup.cfg'),
        })

        subprocess.run(['coverage', 'erase'], check=True)
        subprocess.run(
            ['coverage', 'run', '-m', 'unittest'] +
            (['-q'] if self.verbose == 0 else []) +
            ([self.test_suite] if self.test_suite else ['discover']),
            env=env, check=True
        )
        subprocess.run(['coverage', 'combine'], check=True,
                       stdout=subprocess.DEVNULL)


custom_cmds = {
    'coverage': Coverage,
}

with open(os.path.join(root_dir, 'README.md'), 'r') as f:
    # Read from the file and strip out the badges.
    long_desc = re.sub(r'(^# shellopts.*)\n\n(.+\n)*', r'\1', f.read())

setup(
    name='shellopts',
    version=version,

    description='A registry of runtime options for shell-like interpreters',
    long_description=long_desc,
    long_description_content_type='text/markdown',
    keywords='shell options set shopt',

    license='BSD-3-Clause',

    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',

        'Topic :: System :: Shells',
        'License :: OSI Approved :: BSD License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    packages=find_packages(exclude=['test', 'test.*']),
    package_data={'shellopts': ['data/*.yml']},

    python_requires='>=3.8',
    install_requires=['colorama', 'importlib_metadata', 'importlib_resources',
                      'pyyaml'],
    extras_require={
        'dev': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
        'test': ['coverage', 'flake8 >= 3.7', 'flake8-quotes'],
    },

    entry_points={
        'console_scripts': [
            'shellopts=shellopts.driver:main',
        ],
    },

    test_suite='test',
    cmdclass=custom_cmds,
)
