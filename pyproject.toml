[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU and disk scheduling, the banker's algorithm and a bounded producer/consumer buffer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "fcfs",
    "sjf",
    "round robin",
    "disk scheduling",
    "scan",
    "c-scan",
    "bankers algorithm",
    "producer consumer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fcfs-cpu = "osalgos.cpu:main_fcfs"
sjf-cpu = "osalgos.cpu:main_sjf"
priority-cpu = "osalgos.cpu:main_priority"
round-robin-cpu = "osalgos.cpu:main_round_robin"
producer-consumer = "osalgos.producer_consumer:main"
fcfs-disk = "osalgos.disk:main_fcfs"
scan-disk = "osalgos.disk:main_scan"
cscan-disk = "osalgos.disk:main_cscan"
bankers = "osalgos.bankers:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
