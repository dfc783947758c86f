from setuptools import setup, find_namespace_packages

__version__ = "1.1.0"

requirements = [
    "fastapi",
    "starlette<1.0",
    "dependency-injector>=4.0,<5.0",
    "jinja2",
    "markupsafe",
    "pydantic",
    "uvicorn",
]

setup(
    name="wp-assets",
    version=__version__,
    packages=find_namespace_packages(include=["wp_assets", "wp_assets.*"]),
    package_dir={"wp_assets": "wp_assets"},
    package_data={"wp_assets": ["jinja2/*.html"]},
    install_requires=requirements,
    entry_points={
        "console_scripts": ["wp-assets-server = wp_assets.application:run"],
    },
    extras_require={
        "dev": [
            "black",
            "pylint",
            "bandit",
            "mypy",
            "autoflake",
            "coverage",
            "pytest",
            "pytest-mock",
            "httpx",
        ]
    },
)
