import logging

from setuptools import find_packages, setup

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

install_requires = [
    "torch",
    "numpy",
    "loguru",
    "joblib",
    "vdtoys",
    "click",
    "rich",
]

extras_require = {
    "test": [
        "pytest",
    ],
}

if __name__ == "__main__":
    packages = find_packages(include=["rlwe", "rlwe.*"])
    logger.info(f"Packaging: {', '.join(packages)}")

    setup(
        name="rlwe",
        version="0.1.0",
        description="Ring-LWE public-key encryption with homomorphic addition and multiplication",
        python_requires=">=3.10",
        packages=packages,
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points={
            "console_scripts": [
                "rlwe=rlwe._cli:main",
            ],
        },
    )
