#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="boxtree",
        packages=["boxtree", "boxtree.geombase", "boxtree.tree"],
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Adaptive bounding-volume tree for overlap and ray queries",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["geometry", "aabb", "bvh", "raycast"],
        classifiers=[],
        install_requires=[
            "numpy",
        ],
        extras_require={
            "test": ["pytest"],
        },
        zip_safe=False,
    )
