import setuptools

setuptools.setup(
	name='algolab',
	version='0.1.0',
	packages=[
		'algolab',
		'algolab.disks',
		'algolab.subsequence',
		'algolab.support',
	],
	description='The alternating disks problem and an exhaustive longest-increasing-subsequence oracle',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={'test': ['pytest']},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Education",
		"Development Status :: 3 - Alpha",
    ],
)
