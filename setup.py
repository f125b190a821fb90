from setuptools import setup, find_packages

setup(
    name='kindctl',
    version='0.1.0',
    packages=find_packages(exclude=['kindctl.tests']),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'fastapi',
        'uvicorn',
        'pydantic',
        'pyyaml',
        'jsonschema',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx',
        ],
    },
    entry_points={
        'console_scripts': [
            'kindctl=kindctl.cli:app'
        ]
    },
    description='Validate cluster topology configs and create local Kubernetes clusters from Docker container nodes',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
