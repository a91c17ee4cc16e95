from setuptools import setup, find_packages
from pathlib import Path

# 读取README文件
current_directory = Path(__file__).parent
long_description = "MRCLAM数据工具包 - UTIAS多机器人协同定位数据集提取工具"

# 读取requirements.txt（过滤注释和空行）
def read_requirements():
    requirements_path = current_directory / "requirements.txt"
    if requirements_path.exists():
        with open(requirements_path, 'r', encoding='utf-8') as f:
            requirements = []
            for line in f:
                line = line.strip()
                # 跳过注释行、空行和带有#的行
                if line and not line.startswith('#') and '#' not in line:
                    requirements.append(line)
            return requirements
    return ['numpy>=1.19.0', 'PyYAML>=5.4']

# 读取版本信息
def get_version():
    # 从mrclam_toolkit/__init__.py读取版本号
    version_file = current_directory / "mrclam_toolkit" / "__init__.py"
    if version_file.exists():
        with open(version_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.startswith('__version__'):
                    return line.split('=')[1].strip().strip('"').strip("'")
    return "1.0.0"

setup(
    # 基本信息
    name="mrclam-data-toolkit",
    version=get_version(),
    author="MRCLAM Data Toolkit Team",
    description="UTIAS MRCLAM多机器人定位数据集提取工具包",
    long_description=long_description,
    long_description_content_type="text/plain",

    # 分类信息
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],

    # 包信息
    packages=find_packages(include=['mrclam_toolkit', 'mrclam_toolkit.*']),
    python_requires=">=3.8",

    # 依赖项
    install_requires=read_requirements(),

    # 可选依赖项
    extras_require={
        'dev': [
            'pytest>=6.0.0',
            'flake8>=3.8.0',
            'black>=21.0.0',
            'mypy>=0.900',
        ],
        'test': [
            'pytest>=6.0.0',
        ],
    },

    # 包含的数据文件
    package_data={
        'mrclam_toolkit': [
            'config/*.yaml',
        ],
    },

    # 关键词
    keywords=[
        "robotics", "dataset", "mrclam", "utias", "localization",
        "multi-robot", "odometry", "range-bearing", "data-processing"
    ],

    # 许可证
    license="MIT",

    # 包含所有文件
    include_package_data=True,

    # ZIP安全
    zip_safe=False,
)
