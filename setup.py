from setuptools import setup, find_packages

setup(
    name="tododesk",
    version="0.1.0",
    description="A desktop to-do list built on pywebview with local or SQLite persistence",
    author="Ghua8088",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "tododesk": ["frontend/*.html"],
    },
    install_requires=[
        "pywebview",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tododesk=tododesk.cli:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
