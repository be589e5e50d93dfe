"""Latest build status per build type."""

from teamcity_rest_client.operations.base import Operation


class StatusReport(Operation):
    """Summarize the most recent build of every build type, grouped by project."""

    def execute(self, project_spec=None):
        """Execute the status report.

        Each collection is fetched once and related in memory using the same
        rules as Project.build_types() and Project.builds().

        Args:
            project_spec (str, optional): Limit the report to one project (name or id)

        Returns:
            list: Row dictionaries, one per build type
        """
        if project_spec:
            projects = [self.client.project(project_spec)]
        else:
            projects = self.client.projects()

        if self.logger:
            self.logger.log(f"Building status report for {len(projects)} projects")

        build_types = self.client.build_types()
        latest_builds = self._latest_builds(self.client.builds())

        if self.progress:
            items = self.progress.track(projects, "Collecting status", "projects")
        else:
            items = projects

        rows = []
        for project in items:
            project_build_types = [bt for bt in build_types if bt.project_id == project.id]
            for build_type in project_build_types:
                rows.append(self._row(project, build_type, latest_builds.get(build_type.id)))

            if self.progress:
                self.progress.set_postfix(rows=len(rows), current_project=project.name[:30])
            if self.logger:
                self.logger.log(f"  - Project: {project.name} (ID: {project.id}): {len(project_build_types)} build types")

        if self.logger:
            self.logger.log(f"Status report has {len(rows)} rows")
        return rows

    @staticmethod
    def _latest_builds(builds):
        """Map build type id to its most recent build.

        The server lists builds newest first, so the first one seen wins.
        """
        latest = {}
        for build in builds:
            latest.setdefault(build.build_type_id, build)
        return latest

    @staticmethod
    def _row(project, build_type, build):
        """Merge the records into one row; the report writer picks its columns."""
        row = {**project.to_dict(), **build_type.to_dict()}
        if build:
            row.update(build.to_dict())
            row['success'] = build.success
        else:
            # Build type has never run; keep its own web_url
            row.update(build_number='', status='', start_date='', success=False)
        return row
