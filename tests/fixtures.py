"""Sample TeamCity responses shared by the test modules."""

PROJECTS_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<projects>
  <project name="Amazon API client" id="project54" href="/app/rest/projects/id:project54"/>
  <project name="Apache Ant" id="project28" href="/app/rest/projects/id:project28"/>
</projects>
"""

BUILD_TYPES_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<buildTypes>
  <buildType id="bt297" name="Build" href="/app/rest/buildTypes/id:bt297"
    projectName="Amazon API client" projectId="project54" webUrl="http://teamcity.jetbrains.com/viewType.html?buildTypeId=bt297"/>
  <buildType id="bt296" name="Download missing jar" href="/app/rest/buildTypes/id:bt296"
    projectName="Amazon API client" projectId="project54" webUrl="http://teamcity.jetbrains.com/viewType.html?buildTypeId=bt296"/>
  <buildType id="bt212" name="Ant trunk" href="/app/rest/buildTypes/id:bt212"
    projectName="Apache Ant" projectId="project28" webUrl="http://teamcity.jetbrains.com/viewType.html?buildTypeId=bt212"/>
</buildTypes>
"""

# webUrl ampersands are left unescaped, the way TeamCity sends them
BUILDS_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<builds nextHref="/app/rest/builds?count=100&amp;start=100" count="100">
  <build id="56264" number="126" status="FAILURE" buildTypeId="bt212" startDate="20111021T123714+0400" href="/app/rest/builds/id:56264"
    webUrl="http://teamcity.jetbrains.com/viewLog.html?buildId=56264&buildTypeId=bt212"/>
  <build id="56262" number="568" status="SUCCESS" buildTypeId="bt297" startDate="20111021T120639+0400" href="/app/rest/builds/id:56262"
    webUrl="http://teamcity.jetbrains.com/viewLog.html?buildId=56262&buildTypeId=bt297"/>
  <build id="56100" number="125" status="SUCCESS" buildTypeId="bt212" href="/app/rest/builds/id:56100"
    webUrl="http://teamcity.jetbrains.com/viewLog.html?buildId=56100&buildTypeId=bt212"/>
</builds>
"""

LOGIN_HTML = """
<!DOCTYPE html>
<html id="htmlId">
something
</html>
"""
