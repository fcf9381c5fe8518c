"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='composition-kata',
	version='0.1.0',
	packages=['composition'],
	license='MIT',
	description='Function composition, pipes, and partial application over an element-wise mapper',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Libraries",
		"Topic :: Education",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
