from setuptools import setup, find_packages

setup(
    name="trait_grid",
    version="1.0",
    packages=find_packages(include=["trait_grid", "trait_grid.*"]),
    description=(
        "A tool for rendering illustrated taxon/trait comparison tables as "
        "HTML for iNaturalist comments and journal posts."
    ),
    install_requires=["requests"],
    extras_require={"test": ["pytest"], "docs": ["sphinx", "numpydoc"]},
    entry_points={
        "console_scripts": [
            "trait-grid=trait_grid.scripts.trait_grid:main",
            "trait-grid-inat=trait_grid.scripts.trait_grid_inat:main",
        ],
    },
)
