from pubsub_light.pubsub import EventProps, Events, JobChannel, RESERVED_PREFIX, is_reserved


def test_job_channel_catalog():
    assert JobChannel.NAME == "job"
    assert [e.name for e in JobChannel] == ["job_queued", "run_started", "run_ended"]
    assert Events.JobChannel is JobChannel


def test_channels():
    assert Events.channels() == {"job": JobChannel}


def test_find():
    assert Events.find("job", "run_ended") is JobChannel.run_ended
    assert Events.find("job", "NAME") is None
    assert Events.find("job", "unknown") is None
    assert Events.find("unknown", "run_ended") is None


def test_reserved_props():
    assert [p.name for p in EventProps.Jenkins] == [
        "jenkins_channel",
        "jenkins_event",
        "jenkins_object_name",
        "jenkins_object_id",
        "jenkins_object_url",
    ]
    assert all(is_reserved(p.name) for p in EventProps.Jenkins)
    assert not any(is_reserved(p.name) for p in EventProps.Job)


def test_is_reserved_with_custom_prefix():
    assert RESERVED_PREFIX == "jenkins"
    assert is_reserved("acme_channel", prefix="acme")
    assert not is_reserved("build_number")


def test_is_reserved_requires_namespace_separator():
    assert is_reserved("jenkins")
    assert is_reserved("jenkins_channel")
    assert is_reserved("jenkins.object.url")
    assert not is_reserved("jenkinsfile_path")
    assert not is_reserved("acmecorp_x", prefix="acme")
