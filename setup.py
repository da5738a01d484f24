from setuptools import setup

package_name = 'rovio_teleop'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    data_files=[
        ('share/ament_index/resource_index/packages', ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', ['launch/teleop.launch.py']),
        ('share/' + package_name + '/config', ['config/rovio_teleop_params.yaml']),
    ],
    install_requires=['setuptools'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='you',
    maintainer_email='you@example.com',
    description='Teleop WowWee Rovio with a joystick',
    license='GPL-3.0-or-later',
    entry_points={
        'console_scripts': [
            'teleop = rovio_teleop.teleop_node:main',
        ],
    },
)
