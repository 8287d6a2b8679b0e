import setuptools

setuptools.setup(
	name='minicomb',
	version='0.1.0',
	packages=[
		'minicomb',
		'minicomb.engine',
		'minicomb.markup',
		'minicomb.support',
	],
	description='A small parser-combinator engine with a worked example grammar for a subset of XML',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Topic :: Text Processing :: Markup :: XML",
		"Development Status :: 3 - Alpha",
    ],
)
