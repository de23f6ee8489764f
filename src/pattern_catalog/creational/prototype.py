"""Prototype: new projects are cloned from an existing one."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from ..registry import scenario


@dataclass
class Project:
    id: int
    project_name: str
    source_code: str

    def copy(self) -> Project:
        return copy.copy(self)


class ProjectFactory:
    def __init__(self, project: Project) -> None:
        self.project = project

    def clone_project(self) -> Project:
        return self.project.copy()


@scenario("prototype", category="creational", title="Prototype")
def main() -> None:
    project = Project(1, "testName", "testSource")
    print(project)
    print("\n====================\n")

    copy_project = ProjectFactory(project).clone_project()
    print(copy_project)
    print(f"equal: {copy_project == project}, same object: {copy_project is project}")


if __name__ == "__main__":
    main()

### OUTPUT ###
# Project(id=1, project_name='testName', source_code='testSource')
#
# ====================
#
# Project(id=1, project_name='testName', source_code='testSource')
# equal: True, same object: False
