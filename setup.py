'''
Setup script for the file_log package.
This script reads the dependencies from requirements.txt and configures the package.
It uses setuptools for packaging.
'''

from setuptools import setup, find_packages

from typing import List


def get_requirements(file_path: str) -> List[str]:
    """
    Read the dependencies from a requirements file and return them as a list.

    Args:
        file_path (str): The path to the requirements file (e.g., 'requirements.txt').

    Returns:
        List[str]: A list of dependency strings (e.g., ['PyYAML', 'python-dotenv']).
    """
    requirements_list: List[str] = []
    try:
        with open(file_path, 'r') as file:
            for line in file.readlines():
                requirement = line.strip()

                # Skip blanks, comments and the '-e .' line used for editable installs
                if requirement and not requirement.startswith('#') and requirement != '-e .':
                    requirements_list.append(requirement)

    except FileNotFoundError:
        print(f"Error: The file {file_path} was not found.")

    return requirements_list


setup(
    name='file_log',
    version='0.0.1',
    description='Thread-safe text file logging with daily rotation and a background writer',
    python_requires='>=3.8',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['main'],
    install_requires=get_requirements('requirements.txt'),
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['file-log=main:main'],
    },
)
