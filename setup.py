from setuptools import setup, find_packages
import os

BASE_DIR = os.path.dirname(os.path.realpath(__file__))
exec(open(os.path.join(
    BASE_DIR, 'canonical_opening_hours', 'version.py')).read())

setup(
    name="osm_canonical_opening_hours",
    version=__version__,  # noqa
    packages=find_packages(exclude=["doc", "tests"]),
    author="rezemika",
    author_email="reze.mika@gmail.com",
    description=(
        "A model of the opening_hours fields from OpenStreetMap, "
        "rendered as canonical fields."
    ),
    long_description=open(BASE_DIR + "/README.md", 'r').read(),
    long_description_content_type="text/markdown",
    install_requires=["astral>=2.0", "pytz"],
    include_package_data=True,
    url='http://github.com/rezemika/humanized_opening_hours',
    keywords="openstreetmap opening_hours model renderer",
    classifiers=[
        "Programming Language :: Python",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Utilities",
        "Topic :: Other/Nonlisted Topic",
    ]
)
