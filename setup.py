from setuptools import setup, find_packages

setup(
    name="chart_scripting",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # This will find the chart_scripting package
    package_data={
        "chart_scripting.toolkits.plotting_helper": ["styles/*.mplstyle"],
    },
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    author="Your Name",
    author_email="your.email@example.com",
    description="Standard-styled scatter, line and heatmap charts for analysis scripts",
    keywords="plotting, matplotlib, heatmap, charts",
    python_requires=">=3.8",
)
