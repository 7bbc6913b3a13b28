from setuptools import setup, find_packages


def load_requirements(filename='requirements.txt'):
    with open(filename, 'r') as file:
        return [line for line in file.read().splitlines() if line and not line.startswith('#')]

setup(
    name='primefield',
    version='0.1.0',
    description='Finite field elements of prime order for elliptic curve cryptography.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*', 'examples']),
    install_requires=load_requirements(),
    extras_require={
        'test': ['hypothesis', 'pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Security :: Cryptography',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
)
