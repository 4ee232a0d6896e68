from setuptools import setup, find_packages

setup(
    name='blockalloc',
    version='0.1',
    packages=find_packages(exclude=['tests*']),
    license='MIT',
    description='A simulated block allocator with first-fit, next-fit and best-fit placement',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
