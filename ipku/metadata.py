from dataclasses import dataclass

from ipku import __version__


@dataclass(frozen=True)
class Metadata:
    name: str
    description: str
    version: str
    author: str
    author_email: str
    repository: str

    def as_dict(self):
        return {
            'name': self.name,
            'description': self.description,
            'version': self.version,
            'author': {
                'name': self.author,
                'email': self.author_email,
            },
            'repository': self.repository,
        }


IPKU = Metadata(
    name='IPKU',
    description='Get the public IP address of the client.',
    version=__version__,
    author='Abdul Pasaribu',
    author_email='mail@misterabdul.moe',
    repository='https://github.com/misterabdul/ipku',
)
