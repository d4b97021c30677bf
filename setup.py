import os.path

from setuptools import find_packages, setup

from libsyndication.version import VERSION


def readme():
    try:
        with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as f:
            return f.read()
    except (IOError, OSError):
        return ''


tests_require = ['pytest >= 2.4.0', 'mock >= 1.0.1']


setup(
    name='libsyndication',
    version=VERSION,
    description='Detects syndication formats and versions of XML documents '
                'and loads them into document objects',
    long_description=readme(),
    license='GPLv2 or later',
    packages=find_packages(exclude=['tests']),
    install_requires=[],
    extras_require={
        'lxml': ['lxml'],
        'tests': tests_require,
    },
    tests_require=tests_require,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved ::'
        ' GNU General Public License v2 or later (GPLv2+)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Text Processing :: Markup :: XML'
    ]
)
