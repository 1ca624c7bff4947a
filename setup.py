from setuptools import setup, find_packages

setup(
    name="CascadePriceSignals",
    version="0.1",
    py_modules=['main'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'Click',
        'numpy',
        'PyDispatcher',
        ],
    extras_require = {
        'tests':[
            'pytest'
            ]
        },
    entry_points='''
        [console_scripts]
        cascade=main:cli
    ''')
