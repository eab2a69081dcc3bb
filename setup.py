from setuptools import setup

setup(
    name='atmfjstc-code-writer',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.code_writer', 'atmfjstc.lib.code_writer.ast'],

    install_requires=[],

    extras_require={
        'test': ['pytest'],
    },

    zip_safe=True,

    description="Composable node trees for emitting correctly indented source code",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Code Generators",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
