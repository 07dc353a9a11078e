import setuptools

setuptools.setup(
	name='lr-zero',
	version='0.1.0',
	packages=[
		'lrzero',
		'lrzero.parsing',
		'lrzero.support',
	],
	python_requires='>=3.9',
	description='Canonical LR(0) item-set collections and GOTO tables for context-free grammars',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
