import setuptools

setuptools.setup(
	name='complaint',
	version='1.0.0',
	packages=[
		'complaint',
	],
	description='Compiler-style error displays: numbered lines, colors, underlines, and hints',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
