from minestat_es import AddressOptions, HostnameOptions, QueryProtocols, fetch_server_info
import asyncio


async def main():
    queries = [
        HostnameOptions(hostname="tzdtwsj.top", protocol=QueryProtocols.MODERN, ping=True),
        AddressOptions(address="127.0.0.1", port=25565, protocol=QueryProtocols.LEGACY),
    ]
    for options in queries:
        ms = await fetch_server_info(options)
        print("######################################################################")
        if not ms.online:
            print(f"Server is offline: {ms.error or 'timed out'}")
            continue
        print(
            f"Server is online running version {ms.version} with {ms.players} out of {ms.max_players} players."
        )
        print(f"Message of the day: {ms.motd}")
        if ms.player_info:
            print(f"Players: {', '.join(player.name for player in ms.player_info)}")
        print(f"Latency: {ms.ping_ms}ms")
        print(f"Connected using protocol: {options.protocol}")

asyncio.run(main())
