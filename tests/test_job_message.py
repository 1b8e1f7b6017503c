from dataclasses import dataclass

from pubsub_light.pubsub import Item, JobChannel, JobChannelMessage, SimpleMessage


@dataclass
class _Job:
    full_name: str
    url: str


def test_job_is_an_item():
    assert isinstance(_Job("a", "b"), Item)


def test_job_channel_message_from_item():
    msg = JobChannelMessage(_Job("folder/app", "job/folder/job/app/"), JobChannel.job_queued)

    assert msg.get_channel_name() == "job"
    assert msg.get_event_name() == "job_queued"
    assert msg.job_name == "folder/app"
    assert msg.get("jenkins_object_url") == "job/folder/job/app/"
    assert msg.get("job_name") == "folder/app"
    assert msg.object_id is None


def test_job_channel_message_without_item():
    msg = JobChannelMessage()

    assert msg.properties == {"jenkins_channel": "job"}
    assert msg.job_name is None


def test_object_id_and_run_status():
    msg = JobChannelMessage(event="run_ended").set("jenkins_object_id", "17").set_run_status("SUCCESS")

    assert msg.object_id == "17"
    assert msg.get("job_run_status") == "SUCCESS"


def test_clone_loses_subtype():
    msg = JobChannelMessage(_Job("app", "job/app/"), JobChannel.run_started)

    clone = msg.clone()

    assert type(clone) is SimpleMessage
    assert not isinstance(clone, JobChannelMessage)
    assert clone.properties == msg.properties


def test_subscriber_style_filtering():
    msg = JobChannelMessage(_Job("app", "job/app/"), JobChannel.run_ended)

    assert msg.contains_all({"jenkins_channel": JobChannel.NAME, "jenkins_event": "run_ended"})
    assert not msg.contains_all({"jenkins_channel": JobChannel.NAME, "jenkins_event": "run_started"})
