from setuptools import setup, find_namespace_packages

setup(
    name='file-store-driver',
    version='0.1.0',
    description='Path-confined filesystem storage driver',
    packages=find_namespace_packages(where='src', include=['storage', 'storage.*']),
    package_dir={'': 'src'},
    py_modules=['config'],
    install_requires=[
        'aiofiles',
        'pydantic>=2',
        'pydantic-settings>=2',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'python-dotenv',
        ],
    },
    python_requires='>=3.9',
)
