"""Generic setup.py for treegram."""
from setuptools import setup

from treegram import __version__

with open('README.rst') as inp:
	README = inp.read()

REQUIRES = [
		'numpy',  # '>=1.6.1',
		]
METADATA = dict(name='treegram',
		version=__version__,
		description='Treebank PCFG induction and grammar binarization',
		long_description=README,
		long_description_content_type='text/x-rst',
		classifiers=[
				'Development Status :: 4 - Beta',
				'Environment :: Console',
				'Intended Audience :: Science/Research',
				'License :: OSI Approved :: GNU General Public License (GPL)',
				'Operating System :: POSIX',
				'Programming Language :: Python :: 3',
				'Topic :: Text Processing :: Linguistic',
		],
		python_requires='>=3.6',
		packages=['treegram'],
		install_requires=REQUIRES,
		extras_require={'test': ['pytest']},
		entry_points={
			'console_scripts': ['treegram = treegram.cli:main']},
	)

if __name__ == '__main__':
	setup(**METADATA)
