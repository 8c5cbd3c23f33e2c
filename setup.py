from setuptools import setup

import os


long_description = open(
    os.path.join(
        os.path.dirname(__file__),
        'readme.rst'
    )
).read()

setup(
  name = 'minecraft-assets',
  packages = ['minecraft_assets'],
  version = '0.1.0',
  license='MIT',
  description = 'A pack-access library for the assets of Minecraft: Java Edition.',
  long_description=long_description,
  long_description_content_type='text/x-rst',
  keywords = ['MINECRAFT', 'JAVA-EDITION', 'RESOURCE-PACKS', 'BLOCKSTATES', 'MODELS'],
  python_requires='>=3.8',
  install_requires=[
    'dpath>=2.0',
  ],
  extras_require={
    'test': [
      'pytest',
    ],
  },
  classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Topic :: Software Development :: Libraries',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3',
  ],
)
