from setuptools import setup

setup(name="formcode",
  version="0.1",
  description="Encoding and decoding of application/x-www-form-urlencoded data.",
  license="MIT",
  packages=["formcode"],
  package_dir={'formcode': 'src'},
  install_requires=["click"],
  extras_require={"test": ["pytest"]},
  python_requires="~=3.9",
  entry_points="""
    [console_scripts]
    formcode=formcode.cli:cli
  """)
