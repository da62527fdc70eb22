from setuptools import find_packages, setup

setup(
    name="minpq",
    version="0.1.0",
    description="Indexed min-priority queues with changeable priorities",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["minpq", "minpq.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click",
        "matplotlib",
        "numpy",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["minpq=minpq.main:main"]},
    zip_safe=False,
)
