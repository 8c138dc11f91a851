"""ThunderTrack frame rendering package."""
